"""Core enums package.

Usage:
    from pling.core.enums import Environment
"""

from pling.core.enums.environment import Environment

__all__ = ["Environment"]
