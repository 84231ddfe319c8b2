"""
Season pairing generation for round-robin scheduling.
"""

from typing import Any, Dict, Iterable, List, Optional
from .models import Team, Match, Bye, WeekSchedule, SeasonSchedule
from .teams import canonicalize_teams


def generate_season_schedule(teams: Iterable[Any], total_weeks: int,
                             reserved: Optional[Iterable[str]] = None) -> SeasonSchedule:
    """
    Generate a season of weekly pairings using the circle method.

    Position 0 stays fixed while the rest rotate one step left every week.
    Each cycle of n-1 weeks restarts from the canonical order, and home/away
    roles flip on odd cycles. An odd roster gets a placeholder slot whose
    opponent takes a bye that week.

    Args:
        teams: Raw team list (canonicalized before use)
        total_weeks: Number of weeks to generate
        reserved: Placeholder identities to drop during canonicalization

    Returns:
        SeasonSchedule: Week number (1-based) to that week's pairings
    """
    if isinstance(total_weeks, bool) or not isinstance(total_weeks, int):
        raise TypeError(f"total_weeks must be an integer, got {type(total_weeks).__name__}")
    if total_weeks < 0:
        raise ValueError(f"total_weeks must not be negative: {total_weeks}")

    base = canonicalize_teams(teams, reserved)
    if not base or total_weeks == 0:
        return {}

    # Ensure even number of slots (add placeholder if odd)
    placeholder = Team("__bye__", "BYE")
    if len(base) % 2 == 1:
        base = base + [placeholder]

    n_slots = len(base)
    weeks_per_cycle = n_slots - 1

    season: SeasonSchedule = {}
    week = 1
    cycle = 0
    while week <= total_weeks:
        flip = cycle % 2 == 1
        for round_num in range(weeks_per_cycle):
            if week > total_weeks:
                break
            order = _rotated_order(base, round_num)
            season[week] = _pair_round(order, placeholder, flip)
            week += 1
        cycle += 1

    return season


def _rotated_order(base: List[Team], round_num: int) -> List[Team]:
    """Arrangement for a round: slot 0 fixed, slots 1..n-1 rotated left round_num steps."""
    span = len(base) - 1
    if span == 0:
        return list(base)
    return [base[0]] + [base[1 + (k + round_num) % span] for k in range(span)]


def _pair_round(order: List[Team], placeholder: Team, flip: bool) -> WeekSchedule:
    """Pair slot j with slot n-1-j for one round."""
    n_slots = len(order)
    rows: WeekSchedule = []
    for i in range(n_slots // 2):
        a = order[i]
        b = order[n_slots - 1 - i]

        if a is placeholder:
            rows.append(Bye(team=b))
            continue
        if b is placeholder:
            rows.append(Bye(team=a))
            continue

        # Lower identity plays away, higher at home; inverted on odd cycles
        lo, hi = (a, b) if a.key < b.key else (b, a)
        if flip:
            rows.append(Match(home=lo, away=hi))
        else:
            rows.append(Match(home=hi, away=lo))
    return rows


def week_pairings(season: SeasonSchedule, week: int) -> WeekSchedule:
    """
    Get the pairings for a week, clamping out-of-range weeks.

    Weeks before the first clamp to week 1 and weeks past the end clamp to
    the last generated week.
    """
    if not season:
        return []
    weeks = sorted(season)
    week = max(weeks[0], min(week, weeks[-1]))
    return list(season.get(week, []))


def get_schedule_summary(season: SeasonSchedule) -> Dict:
    """
    Get summary statistics for a season schedule.

    Args:
        season: Season schedule

    Returns:
        Dict: Summary statistics
    """
    if not season:
        return {}

    team_counts: Dict[str, Dict[str, Any]] = {}

    def counts_for(team: Team) -> Dict[str, Any]:
        if team.key not in team_counts:
            team_counts[team.key] = {
                'name': team.display_name or team.identity,
                'home': 0,
                'away': 0,
                'byes': 0,
            }
        return team_counts[team.key]

    total_matches = 0
    total_byes = 0
    for pairings in season.values():
        for pairing in pairings:
            if isinstance(pairing, Match):
                counts_for(pairing.home)['home'] += 1
                counts_for(pairing.away)['away'] += 1
                total_matches += 1
            else:
                counts_for(pairing.team)['byes'] += 1
                total_byes += 1

    for stats in team_counts.values():
        stats['games'] = stats['home'] + stats['away']
        stats['balance'] = stats['home'] - stats['away']

    summary = {
        'weeks': len(season),
        'total_matches': total_matches,
        'total_byes': total_byes,
        'teams': dict(sorted(team_counts.items())),
    }

    return summary
