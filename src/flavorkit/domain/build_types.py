"""Build types and the variant artifact kinds."""

import enum
import typing as t

from pydantic import BaseModel, ConfigDict, Field


class BuildTypeName(enum.StrEnum):
    """Closed set of build type names."""

    DEBUG = "debug"
    RELEASE = "release"


class ArtifactType(enum.StrEnum):
    """Packaged artifact kinds the orchestrator can produce."""

    APK = "apk"
    APPBUNDLE = "appbundle"

    @property
    def gradle_action(self) -> str:
        """Gradle task prefix producing this artifact."""
        return {
            ArtifactType.APK: "assemble",
            ArtifactType.APPBUNDLE: "bundle",
        }[self]


class BuildType(BaseModel):
    """Optimization, debuggability and signing settings for a build."""

    model_config = ConfigDict(frozen=True)

    name: BuildTypeName
    debuggable: bool
    minify: bool
    shrink_resources: bool
    signing_config_ref: BuildTypeName = Field(
        description="Name of the signing config this build type uses"
    )
    proguard_files: tuple[str, ...] = Field(
        default=(),
        description="Rule files handed to the shrinker, passed through untouched",
    )

    @property
    def requires_signing(self) -> bool:
        """Whether the build must resolve real signing credentials."""
        return self.signing_config_ref == BuildTypeName.RELEASE


BUILD_TYPES: t.Final[t.Mapping[BuildTypeName, BuildType]] = {
    BuildTypeName.DEBUG: BuildType(
        name=BuildTypeName.DEBUG,
        debuggable=True,
        minify=False,
        shrink_resources=False,
        signing_config_ref=BuildTypeName.DEBUG,
    ),
    BuildTypeName.RELEASE: BuildType(
        name=BuildTypeName.RELEASE,
        debuggable=False,
        minify=True,
        shrink_resources=True,
        signing_config_ref=BuildTypeName.RELEASE,
        proguard_files=("proguard-android-optimize.txt", "proguard-rules.pro"),
    ),
}
