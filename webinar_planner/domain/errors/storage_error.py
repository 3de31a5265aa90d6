"""Storage failure raised by webinar repository adapters.

Part of the WebinarRepository contract. Unlike the webinar rule violations,
a storage failure is unexpected: adapters raise it and it propagates
unmodified through the handlers to the transport layer.

Raised when:
    - create() is called with an identifier that already exists
    - update() is called with an identifier that does not exist
"""


class StorageError(Exception):
    """Webinar storage operation failed.

    Attributes:
        webinar_id: Identifier of the webinar involved.
    """

    def __init__(self, message: str, *, webinar_id: str) -> None:
        """Initialize the error.

        Args:
            message: Human-readable description.
            webinar_id: Identifier of the webinar involved.
        """
        super().__init__(message)
        self.webinar_id = webinar_id
