"""Resolved build variant descriptor."""

from pydantic import BaseModel, ConfigDict, Field

from .build_types import ArtifactType, BuildType
from .environments import Environment
from .signing import SigningConfig


class BuildVariant(BaseModel):
    """One environment combined with one build type.

    This is the document handed to the build orchestrator.
    """

    model_config = ConfigDict(frozen=True)

    environment: Environment
    build_type: BuildType
    application_id: str = Field(description="Base id plus the environment suffix")
    version_name_suffix: str = Field(default="")
    display_name: str
    constants: dict[str, str] = Field(
        description="Compile-time constants (API_BASE_URL, ENVIRONMENT)"
    )
    signing: SigningConfig | None = Field(
        default=None,
        description="Resolved signing config; None when the build type does "
        "not need one or it has not been resolved yet",
    )

    @property
    def name(self) -> str:
        """Camel-cased variant name, e.g. ``stagingRelease``."""
        return f"{self.environment.name}{self.build_type.name.capitalize()}"

    def gradle_task(self, artifact: ArtifactType = ArtifactType.APK) -> str:
        """Gradle task that builds this variant, e.g. ``bundleDevRelease``."""
        env = self.environment.name.capitalize()
        build_type = self.build_type.name.capitalize()
        return f"{artifact.gradle_action}{env}{build_type}"

    def install_task(self) -> str:
        """Gradle task installing this variant on a device, e.g. ``installDevDebug``."""
        env = self.environment.name.capitalize()
        return f"install{env}{self.build_type.name.capitalize()}"

    def flutter_args(
        self, command: str = "build", artifact: ArtifactType = ArtifactType.APK
    ) -> list[str]:
        """Flutter tool arguments for this variant.

        ``build`` targets an artifact; ``run`` launches on a device. The
        build type flag is always explicit.
        """
        args = [command]
        if command == "build":
            args.append(str(artifact))
        flavor = str(self.environment.name)
        return [*args, "--flavor", flavor, f"--{self.build_type.name}"]

    def version_name(self, base: str) -> str:
        """Full version name for a base version such as ``1.2.0``."""
        return f"{base}{self.version_name_suffix}"

    def dart_defines(self) -> list[str]:
        """Constants rendered as Flutter ``--dart-define`` arguments."""
        return [f"--dart-define={key}={value}" for key, value in self.constants.items()]
