"""Deployment environments (product flavors)."""

import enum
import typing as t

from pydantic import BaseModel, ConfigDict, Field


class EnvironmentName(enum.StrEnum):
    """Closed set of flavor names."""

    DEV = "dev"
    STAGING = "staging"
    PRODUCTION = "production"


class Environment(BaseModel):
    """A named deployment target with its own identity suffix and API endpoint."""

    model_config = ConfigDict(frozen=True)

    name: EnvironmentName = Field(description="Flavor name")
    application_id_suffix: str = Field(
        default="",
        description="Appended to the base application id; empty for production",
    )
    version_name_suffix: str = Field(
        default="",
        description="Appended to the version name; empty for production",
    )
    display_name: str = Field(description="Launcher label (app_name resource)")
    api_base_url: str = Field(description="Backend endpoint for this environment")


ENVIRONMENTS: t.Final[t.Mapping[EnvironmentName, Environment]] = {
    EnvironmentName.DEV: Environment(
        name=EnvironmentName.DEV,
        application_id_suffix=".dev",
        version_name_suffix="-dev",
        display_name="Mini Challenges (Dev)",
        api_base_url="https://dev-api.example.com",
    ),
    EnvironmentName.STAGING: Environment(
        name=EnvironmentName.STAGING,
        application_id_suffix=".staging",
        version_name_suffix="-staging",
        display_name="Mini Challenges (Staging)",
        api_base_url="https://staging-api.example.com",
    ),
    EnvironmentName.PRODUCTION: Environment(
        name=EnvironmentName.PRODUCTION,
        display_name="Mini Coding Challenges",
        api_base_url="https://api.example.com",
    ),
}
