"""Custom exceptions for flavorkit."""

import typing as t
from pathlib import Path


class FlavorkitError(Exception):
    """Base exception for flavorkit errors."""

    pass


class UnknownVariantError(FlavorkitError):
    """Raised when an environment or build type name is not in its closed set."""

    def __init__(self, *, kind: str, value: str, allowed: t.Iterable[str]) -> None:
        self.kind = kind
        self.value = value
        self.allowed = tuple(allowed)
        message = (
            f"Unknown {kind} '{value}'. Expected one of: {', '.join(self.allowed)}"
        )
        super().__init__(message)


class SigningError(FlavorkitError):
    """Base exception for signing configuration failures."""

    pass


class IncompleteSigningPropertiesError(SigningError):
    """Raised when CI injected some, but not all, signing properties.

    A partial override almost always means a misconfigured pipeline, so it is
    never treated as a request to fall back to local credentials.
    """

    def __init__(self, *, missing: t.Sequence[str]) -> None:
        self.missing = tuple(missing)
        message = (
            "Incomplete injected signing properties, missing: "
            f"{', '.join(self.missing)}"
        )
        super().__init__(message)


class NoSigningConfigError(SigningError):
    """Raised when none of the signing sources is available."""

    def __init__(self, *, checked: t.Sequence[str]) -> None:
        self.checked = tuple(checked)
        message = "No signing configuration found. Checked: " + "; ".join(
            self.checked
        )
        super().__init__(message)


class UnusableSigningConfigError(SigningError):
    """Raised when a resolved signing config lacks fields needed to sign."""

    def __init__(self, *, source: str, missing: t.Sequence[str]) -> None:
        self.source = source
        self.missing = tuple(missing)
        message = (
            f"Signing config from {source} is not usable, missing: "
            f"{', '.join(self.missing)}"
        )
        super().__init__(message)


class PropertiesFileError(SigningError):
    """Raised when the signing properties file exists but cannot be read."""

    def __init__(self, *, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read signing properties {path}: {reason}")
