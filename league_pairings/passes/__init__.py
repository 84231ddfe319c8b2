"""
Repair passes for edited schedules.
"""

from .normalize import normalize_week, normalize_season

__all__ = [
    "normalize_week",
    "normalize_season",
]
