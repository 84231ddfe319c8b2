"""
Team list canonicalization.
"""

from typing import Any, Iterable, List, Optional

from .config import ZERO_IDENTITY
from .models import Team


def _coerce_team(raw: Any) -> Optional[Team]:
    """Turn a Team, mapping or bare identity into a Team."""
    if isinstance(raw, Team):
        return raw
    if isinstance(raw, dict):
        identity = raw.get('identity', raw.get('owner'))
        name = raw.get('display_name', raw.get('name'))
        return Team(str(identity or ''), str(name or ''))
    if isinstance(raw, str):
        return Team(raw)
    if raw is None:
        return None
    raise TypeError(f"Cannot interpret {type(raw).__name__} as a team")


def canonicalize_teams(teams: Iterable[Any],
                       reserved: Optional[Iterable[str]] = None) -> List[Team]:
    """
    Deduplicate and order a raw team list.

    Identities are lowercased, empty and reserved placeholder identities are
    dropped, and the first occurrence of each identity keeps its display name.
    The result is sorted by identity, so any list holding the same identities
    yields the same sequence.

    Args:
        teams: Team objects, dicts with identity/display_name (or owner/name),
            or identity strings
        reserved: Placeholder identities to drop (defaults to the zero address)

    Returns:
        List[Team]: Canonical team sequence
    """
    if isinstance(teams, (str, bytes)) or not isinstance(teams, Iterable):
        raise TypeError("teams must be a sequence of teams")

    if reserved is None:
        reserved = [ZERO_IDENTITY]
    reserved_keys = {identity.strip().lower() for identity in reserved}

    seen = set()
    out = []
    for raw in teams:
        team = _coerce_team(raw)
        if team is None:
            continue
        key = team.key
        if not key or key in reserved_keys or key in seen:
            continue
        seen.add(key)
        out.append(Team(key, team.display_name.strip()))

    out.sort(key=lambda t: t.identity)
    return out
