"""
Data models for league pairings.
"""

from dataclasses import dataclass
from typing import List, Dict, Any, Iterable, Optional, Tuple, Union
import pandas as pd


@dataclass(frozen=True)
class Team:
    """A league participant, identified case-insensitively."""
    identity: str
    display_name: str = ""

    @property
    def key(self) -> str:
        """Canonical (trimmed, lowercased) identity."""
        return self.identity.strip().lower()

    def __eq__(self, other):
        if not isinstance(other, Team):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __lt__(self, other: "Team") -> bool:
        return self.key < other.key


@dataclass(frozen=True)
class Match:
    """A head-to-head pairing for one week."""
    home: Team
    away: Team

    @property
    def teams(self) -> Tuple[Team, Team]:
        """Get both teams in this match."""
        return (self.home, self.away)


@dataclass(frozen=True)
class Bye:
    """A week off for a single team."""
    team: Team

    @property
    def teams(self) -> Tuple[Team]:
        return (self.team,)


Pairing = Union[Match, Bye]
WeekSchedule = List[Pairing]
SeasonSchedule = Dict[int, WeekSchedule]


def pairing_to_dict(pairing: Pairing) -> Dict[str, Any]:
    """Convert a pairing to its tagged dictionary form."""
    if isinstance(pairing, Match):
        return {
            'type': 'match',
            'home': pairing.home.identity,
            'away': pairing.away.identity,
        }
    if isinstance(pairing, Bye):
        return {'type': 'bye', 'team': pairing.team.identity}
    raise TypeError(f"Not a pairing: {pairing!r}")


def pairing_from_dict(data: Dict[str, Any], roster: Optional[Iterable[Team]] = None) -> Pairing:
    """
    Build a pairing from its tagged dictionary form.

    Identities found in ``roster`` resolve to the roster's Team (and its
    display name); anything else becomes a bare Team so that validation and
    normalization can deal with it.

    Args:
        data: Dictionary with a ``type`` of ``match`` or ``bye``
        roster: Optional teams used to resolve identities

    Returns:
        Pairing: Match or Bye
    """
    lookup = {team.key: team for team in (roster or [])}

    def resolve(identity: str) -> Team:
        identity = str(identity or '')
        return lookup.get(identity.strip().lower(), Team(identity))

    kind = str(data.get('type', '')).lower()
    if kind == 'match':
        return Match(home=resolve(data.get('home')), away=resolve(data.get('away')))
    if kind == 'bye':
        return Bye(team=resolve(data.get('team')))
    raise ValueError(f"Unknown pairing type: {data.get('type')!r}. Must be 'match' or 'bye'")


def season_to_dataframe(season: SeasonSchedule) -> pd.DataFrame:
    """Convert a season schedule to a pandas DataFrame."""
    if not season:
        return pd.DataFrame()

    data = []
    for week in sorted(season):
        for order, pairing in enumerate(season[week], start=1):
            if isinstance(pairing, Match):
                data.append({
                    'Week': week,
                    'Order': order,
                    'Type': 'Match',
                    'Home': pairing.home.display_name or pairing.home.identity,
                    'Away': pairing.away.display_name or pairing.away.identity,
                    'Bye': '',
                })
            else:
                data.append({
                    'Week': week,
                    'Order': order,
                    'Type': 'Bye',
                    'Home': '',
                    'Away': '',
                    'Bye': pairing.team.display_name or pairing.team.identity,
                })

    return pd.DataFrame(data)
