"""
Normalization pass that repairs edited weekly pairings.
"""

from typing import Any, Iterable, List
from ..models import Team, Match, Bye, WeekSchedule, SeasonSchedule
from ..teams import canonicalize_teams


def normalize_week(week: WeekSchedule, roster: Iterable[Any]) -> WeekSchedule:
    """
    Repair a week's pairings so every roster team appears exactly once.

    Rows are taken in input order and the first row to claim a team wins.
    Rows with unknown teams or a team playing itself are dropped. A match
    that reuses one already-claimed team is dropped and its other side gets
    a bye; a match that reuses both is dropped outright. Byes for claimed
    teams are dropped. Unclaimed roster teams get a bye at the end.

    Args:
        week: Edited (possibly invalid) pairings
        roster: League teams

    Returns:
        WeekSchedule: Matches ordered by (away, home) identity, then byes by identity
    """
    if isinstance(week, (str, bytes)) or not isinstance(week, Iterable):
        raise TypeError("week must be a sequence of pairings")

    teams = canonicalize_teams(roster)
    league = {team.key: team for team in teams}
    used = set()
    matches: List[Match] = []
    byes: List[Bye] = []

    def claim_bye(key: str) -> None:
        used.add(key)
        byes.append(Bye(team=league[key]))

    for pairing in week:
        if isinstance(pairing, Bye):
            key = pairing.team.key
            if key in league and key not in used:
                claim_bye(key)
            continue

        # Malformed row (validate_week reports it)
        if not isinstance(pairing, Match):
            continue

        home = pairing.home.key
        away = pairing.away.key
        if home == away or home not in league or away not in league:
            continue

        home_used = home in used
        away_used = away in used
        if home_used and away_used:
            continue
        if away_used:
            claim_bye(home)
        elif home_used:
            claim_bye(away)
        else:
            matches.append(Match(home=league[home], away=league[away]))
            used.add(home)
            used.add(away)

    for key in league:
        if key not in used:
            claim_bye(key)

    matches.sort(key=lambda m: (m.away.key, m.home.key))
    byes.sort(key=lambda b: b.team.key)
    return [*matches, *byes]


def normalize_season(season: SeasonSchedule, roster: Iterable[Any]) -> SeasonSchedule:
    """
    Run normalize_week over every week of a season.

    Args:
        season: Season schedule
        roster: League teams

    Returns:
        SeasonSchedule: Repaired schedule with the same week numbers
    """
    teams: List[Team] = canonicalize_teams(roster)
    return {week: normalize_week(season[week], teams) for week in sorted(season)}
