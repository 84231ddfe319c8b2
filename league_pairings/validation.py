"""
Validation of weekly pairings against a league roster.
"""

from collections import Counter
from typing import Any, Dict, Iterable, List
from .models import Match, Bye, WeekSchedule, SeasonSchedule
from .teams import canonicalize_teams


def validate_week(week: WeekSchedule, roster: Iterable[Any]) -> List[str]:
    """
    Check a single week's pairings against a roster.

    Args:
        week: The week's pairings
        roster: League teams

    Returns:
        List[str]: Violation messages, empty when the week is valid
    """
    teams = canonicalize_teams(roster)
    league = {team.key for team in teams}
    seen = Counter()
    errors = []

    for row, pairing in enumerate(week, start=1):
        if isinstance(pairing, Bye):
            key = pairing.team.key
            if key not in league:
                errors.append(f"Row {row}: BYE team {pairing.team.identity} not in league")
            seen[key] += 1
        elif isinstance(pairing, Match):
            home = pairing.home.key
            away = pairing.away.key
            if home not in league or away not in league:
                errors.append(f"Row {row}: team not in league")
            if home == away:
                errors.append(f"Row {row}: team plays itself")
            seen[home] += 1
            seen[away] += 1
        else:
            errors.append(f"Row {row}: not a match or bye")

    # Zero or repeated use of a league team is flagged; normalize_week repairs both
    for team in teams:
        count = seen[team.key]
        if count != 1:
            errors.append(f"Team {team.identity} used {count} time(s) this week")

    return errors


def validate_season(season: SeasonSchedule, roster: Iterable[Any]) -> Dict[str, List[str]]:
    """
    Validate every week of a season schedule.

    Args:
        season: Season schedule
        roster: League teams

    Returns:
        Dict[str, List[str]]: Validation results
    """
    violations = {
        'errors': [],
        'warnings': []
    }

    if not season:
        return violations

    teams = canonicalize_teams(roster)
    weeks = sorted(season)

    for week in weeks:
        for error in validate_week(season[week], teams):
            violations['errors'].append(f"Week {week}: {error}")

    # Week numbers should run 1..N without gaps
    if weeks != list(range(1, len(weeks) + 1)):
        violations['warnings'].append(f"Week numbers are not contiguous from 1: {weeks}")

    # Within one cycle every fixture should be unique
    n_slots = len(teams) + len(teams) % 2
    weeks_per_cycle = max(n_slots - 1, 1)
    for start in range(0, len(weeks), weeks_per_cycle):
        block = weeks[start:start + weeks_per_cycle]
        fixtures = Counter()
        for week in block:
            for pairing in season[week]:
                if isinstance(pairing, Match):
                    fixtures[tuple(sorted((pairing.home.key, pairing.away.key)))] += 1
        for (a, b), count in sorted(fixtures.items()):
            if count > 1:
                violations['warnings'].append(
                    f"Weeks {block[0]}-{block[-1]}: {a} and {b} meet {count} times"
                )

    return violations
