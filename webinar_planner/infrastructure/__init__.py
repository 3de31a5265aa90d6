"""Infrastructure layer - Adapters for domain protocols.

- persistence/: SQLAlchemy models, database manager, webinar repositories
- logging/: structlog console adapter
- clock/: system UTC clock
- identifiers/: UUIDv7 generator
"""
