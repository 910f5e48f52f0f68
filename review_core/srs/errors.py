"""
Errors raised by the review engine.

All of them signal a contract violation by the caller. They are raised
as-is and never retried or repaired inside the engine.
"""

from __future__ import annotations
from typing import Any, Optional


class ReviewEngineError(Exception):
    """Base class for review engine errors."""


class InvalidAction(ReviewEngineError, ValueError):
    """The action is not one the called operation accepts."""

    def __init__(self, action: Any, allowed: Optional[list[str]] = None):
        self.action = action
        self.allowed = allowed or []
        message = f"Invalid action: {action!r}"
        if self.allowed:
            message += f" (expected one of: {', '.join(self.allowed)})"
        super().__init__(message)


class InvalidItemState(ReviewEngineError, ValueError):
    """A review item breaks one of the record invariants."""

    def __init__(self, item_id: Any, reason: str):
        self.item_id = item_id
        self.reason = reason
        super().__init__(f"Invalid state for item {item_id!r}: {reason}")
