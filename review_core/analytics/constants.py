"""
Constants for practice analytics.
"""

from __future__ import annotations

from typing import Final

from review_core.srs.constants import ReviewAction


# Decayed button usage: every press multiplies all tallies by the decay,
# then adds the increment to the pressed action
USAGE_DECAY: Final[float] = 0.95
USAGE_INCREMENT: Final[float] = 1.0

USAGE_ACTIONS: Final[list[str]] = [action.value for action in ReviewAction]
