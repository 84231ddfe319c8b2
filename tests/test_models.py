"""
Tests for pairing models and conversions.
"""

import pytest
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).parent.parent))

from league_pairings.models import (
    Team,
    Match,
    Bye,
    pairing_to_dict,
    pairing_from_dict,
    season_to_dataframe,
)
from league_pairings.matchups import generate_season_schedule


def test_team_identity_is_case_insensitive():
    """Same identity in any casing and with any name is the same team."""
    assert Team("0xAbC", "One") == Team("0xabc", "Two")
    assert hash(Team("0xAbC")) == hash(Team("0xABC"))
    assert len({Team("X"), Team("x"), Team("y")}) == 2
    assert Team("a") < Team("B")


def test_pairing_dicts():
    """Pairings convert to tagged dictionaries and back."""
    roster = [Team("0xaa", "Aces"), Team("0xbb", "Bears")]

    match = Match(home=roster[1], away=roster[0])
    assert pairing_to_dict(match) == {'type': 'match', 'home': '0xbb', 'away': '0xaa'}
    assert pairing_to_dict(Bye(roster[0])) == {'type': 'bye', 'team': '0xaa'}

    parsed = pairing_from_dict({'type': 'match', 'home': '0xBB', 'away': '0xAA'}, roster)
    assert parsed == match
    assert parsed.home.display_name == "Bears"


def test_pairing_from_dict_keeps_unknown_teams():
    """Identities outside the roster are kept as bare teams."""
    parsed = pairing_from_dict({'type': 'BYE', 'team': '0xzz'}, [Team("0xaa")])

    assert parsed == Bye(Team("0xzz"))
    assert parsed.team.display_name == ""


def test_pairing_from_dict_rejects_unknown_type():
    """An unknown tag is a caller error."""
    with pytest.raises(ValueError, match="Unknown pairing type"):
        pairing_from_dict({'type': 'triple'})

    with pytest.raises(TypeError, match="Not a pairing"):
        pairing_to_dict(("a", "b"))


def test_season_to_dataframe():
    """One row per pairing with week and order columns."""
    season = generate_season_schedule([Team("a", "Aces"), Team("b", "Bears"), Team("c")], 3)

    df = season_to_dataframe(season)

    assert list(df.columns) == ['Week', 'Order', 'Type', 'Home', 'Away', 'Bye']
    assert len(df) == 6
    assert (df['Type'] == 'Bye').sum() == 3
    assert df.iloc[0]['Week'] == 1
    # Teams without a display name fall back to the identity
    assert 'c' in set(df['Bye'])


def test_season_to_dataframe_empty():
    """An empty season gives an empty frame."""
    assert season_to_dataframe({}).empty
