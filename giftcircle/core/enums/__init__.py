"""Core enums package.

Usage:
    from giftcircle.core.enums import ErrorCode, Environment
"""

from giftcircle.core.enums.environment import Environment
from giftcircle.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
