"""Authentication dependencies.

Identity is delegated to an upstream gateway, which forwards the
authenticated user's identifier in the X-User-Id header. These dependencies
turn that header into a domain User for the route handlers.

Usage:
    @router.post("/webinars")
    async def organize_webinar(current_user: AuthenticatedUser): ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from webinar_planner.domain.entities.user import User

USER_ID_HEADER = "X-User-Id"

# auto_error=False so a missing header becomes our own RFC 9457 401
user_id_scheme = APIKeyHeader(name=USER_ID_HEADER, auto_error=False)


async def get_current_user(
    user_id: Annotated[str | None, Security(user_id_scheme)],
) -> User:
    """Get the authenticated user from the forwarded identity header.

    Args:
        user_id: Value of the X-User-Id header, if present.

    Returns:
        User: Authenticated user.

    Raises:
        HTTPException: 401 if the header is missing or blank.
    """
    if user_id is None or not user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return User(id=user_id.strip())


# Type alias for protected routes
AuthenticatedUser = Annotated[User, Depends(get_current_user)]
