"""Domain layer - Pure business logic.

This layer contains the webinar entity, its business rules, the closed set of
webinar errors, and the protocols (ports) the application layer depends on.
It has NO dependencies on any framework or infrastructure.

Structure:
- entities/: Domain entities (Webinar, User) and scheduling policy constants
- errors/: Webinar rule violations and the repository storage error
- protocols/: Repository, clock, identifier, principal and logger ports
"""
