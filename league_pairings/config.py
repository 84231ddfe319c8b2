"""
Configuration management for league pairings.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Dict, Union

from .models import Team


ZERO_IDENTITY = "0x0000000000000000000000000000000000000000"


class TeamEntry(BaseModel):
    """A team as listed in the league configuration."""
    identity: str = Field(description="Unique team identity (case-insensitive)")
    display_name: str = Field(default="", description="Name shown on schedules")

    @field_validator('identity')
    @classmethod
    def validate_identity(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Team identity must not be empty")
        return v


class ExcelOut(BaseModel):
    """Excel output configuration."""
    include_summaries: bool = Field(default=True, description="Include summary sheets")
    sheets: Dict[str, Union[str, bool]] = Field(
        default_factory=lambda: {
            "schedule_name": "Season Schedule",
            "summary_name": "Team Summary",
        },
        description="Sheet names and options"
    )


class LeagueConfig(BaseModel):
    """Main configuration for a league's pairing schedule."""
    teams: List[TeamEntry] = Field(default_factory=list, description="League teams")
    reg_season_weeks: int = Field(default=14, ge=0, description="Regular season length in weeks")
    reserved_identities: List[str] = Field(
        default_factory=lambda: [ZERO_IDENTITY],
        description="Placeholder identities that never count as teams"
    )

    # Output configuration
    excel: ExcelOut = Field(default_factory=ExcelOut)

    @field_validator('reserved_identities')
    @classmethod
    def validate_reserved(cls, v):
        return [identity.strip().lower() for identity in v]

    def get_teams(self) -> List[Team]:
        """Get configured teams as model objects, in listed order."""
        return [Team(entry.identity, entry.display_name) for entry in self.teams]


def load_config(config_path: str) -> LeagueConfig:
    """Load configuration from YAML file."""
    import yaml

    with open(config_path, 'r') as f:
        config_data = yaml.safe_load(f) or {}

    return LeagueConfig(**config_data)


def save_config(config: LeagueConfig, config_path: str) -> None:
    """Save configuration to YAML file."""
    import yaml

    with open(config_path, 'w') as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, indent=2)
