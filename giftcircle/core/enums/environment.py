"""Application environment types.

Environments:
- DEVELOPMENT: Local development, colored console logs
- TESTING: Automated test execution
- CI: Continuous integration
- PRODUCTION: Deployed service, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
