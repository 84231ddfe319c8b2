"""
Tests for week and season validation.
"""

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).parent.parent))

from league_pairings.models import Team, Match, Bye
from league_pairings.matchups import generate_season_schedule
from league_pairings.validation import validate_week, validate_season

A, B, C, D = Team("a", "Aces"), Team("b", "Bears"), Team("c", "Cobras"), Team("d", "Ducks")
ROSTER = [A, B, C, D]


def test_valid_week():
    """A complete week with distinct teams has no violations."""
    week = [Match(A, B), Match(C, D)]

    assert validate_week(week, ROSTER) == []


def test_valid_week_with_byes():
    """Byes count as an appearance."""
    week = [Match(A, B), Bye(C), Bye(D)]

    assert validate_week(week, ROSTER) == []


def test_casing_does_not_matter():
    """Identities match the roster case-insensitively."""
    week = [Match(Team("A"), Team("B")), Match(Team("C"), Team("D"))]

    assert validate_week(week, ROSTER) == []


def test_missing_and_duplicate_teams():
    """Teams used zero or several times are each reported."""
    week = [Match(A, B), Match(A, C)]

    errors = validate_week(week, ROSTER)

    assert errors == [
        "Team a used 2 time(s) this week",
        "Team d used 0 time(s) this week",
    ]


def test_self_match_and_unknown_teams():
    """Row-level problems are reported with 1-based row numbers."""
    stranger = Team("z")
    week = [Match(A, A), Match(B, stranger), Bye(stranger), Match(C, D)]

    errors = validate_week(week, ROSTER)

    assert "Row 1: team plays itself" in errors
    assert "Row 2: team not in league" in errors
    assert "Row 3: BYE team z not in league" in errors
    assert "Team a used 2 time(s) this week" in errors
    assert len(errors) == 4


def test_empty_week_reports_every_team():
    """All violations are reported, none capped."""
    errors = validate_week([], ROSTER)

    assert len(errors) == 4
    assert all(error.endswith("used 0 time(s) this week") for error in errors)


def test_reports_malformed_rows():
    """Rows that are not a Match or Bye are reported, not raised."""
    week = [Match(A, B), None, ("c", "d"), Match(C, D)]

    errors = validate_week(week, ROSTER)

    assert errors == [
        "Row 2: not a match or bye",
        "Row 3: not a match or bye",
    ]


def test_untrimmed_identities_match_roster():
    """Surrounding whitespace in an identity does not make it a different team."""
    roster = [Team(" A "), B, C, D]
    week = [Match(Team(" a "), Team("b ")), Match(C, D)]

    assert validate_week(week, roster) == []


def test_validate_season_clean():
    """A generated season validates without errors or warnings."""
    season = generate_season_schedule(ROSTER, 3)

    assert validate_season(season, ROSTER) == {'errors': [], 'warnings': []}


def test_validate_season_reports_week_errors():
    """Week problems are prefixed with the week number."""
    season = generate_season_schedule(ROSTER, 3)
    season[2] = [Match(A, B)]

    violations = validate_season(season, ROSTER)

    assert "Week 2: Team c used 0 time(s) this week" in violations['errors']
    assert "Week 2: Team d used 0 time(s) this week" in violations['errors']


def test_validate_season_warnings():
    """Gaps in week numbers and repeated fixtures within a cycle are warned about."""
    season = {
        1: [Match(A, B), Match(C, D)],
        2: [Match(B, A), Match(D, C)],
        4: [Match(A, C), Match(B, D)],
    }

    violations = validate_season(season, ROSTER)

    assert violations['errors'] == []
    assert "Week numbers are not contiguous from 1: [1, 2, 4]" in violations['warnings']
    assert "Weeks 1-4: a and b meet 2 times" in violations['warnings']
    assert "Weeks 1-4: c and d meet 2 times" in violations['warnings']
