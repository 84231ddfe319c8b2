"""
League Pairings - round-robin season schedules and weekly pairing repair.
"""

__version__ = "0.1.0"

from .config import LeagueConfig
from .models import Team, Match, Bye, Pairing, WeekSchedule, SeasonSchedule
from .teams import canonicalize_teams
from .matchups import generate_season_schedule
from .validation import validate_week
from .passes import normalize_week
from .export import write_excel

__all__ = [
    "LeagueConfig",
    "Team",
    "Match",
    "Bye",
    "Pairing",
    "WeekSchedule",
    "SeasonSchedule",
    "canonicalize_teams",
    "generate_season_schedule",
    "validate_week",
    "normalize_week",
    "write_excel",
]
