"""
Analytics package exports.
"""

from review_core.analytics.service import build_practice_summary
from review_core.analytics.types import PracticeSummary

__all__ = [
    "build_practice_summary",
    "PracticeSummary",
]
