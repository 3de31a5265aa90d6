"""Application environment types.

Defines the runtime environments of the webinar planner.
Used by Settings to pick environment-specific behavior (log rendering, debug).

Environments:
- DEVELOPMENT: Local development with hot reload, human-readable logs
- TESTING: Automated test execution
- CI: Continuous integration
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
