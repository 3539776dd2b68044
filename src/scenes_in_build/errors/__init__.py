"""Custom exception hierarchy for the Scenes In Build editor."""

from __future__ import annotations


class ScenesInBuildError(Exception):
    """Base class for all custom errors raised by the editor."""


# --- 3-layer hierarchy ---

class DomainError(ScenesInBuildError):
    """Base class for domain-level errors."""


class InfrastructureError(ScenesInBuildError):
    """Base class for infrastructure-level errors."""


class ApplicationError(ScenesInBuildError):
    """Base class for application-level errors."""


# --- Infrastructure errors ---

class BuildListError(InfrastructureError):
    """Base class for failures of the persisted build list."""


class BuildListReadError(BuildListError):
    """Raised when the build list cannot be read from its store."""


class BuildListWriteError(BuildListError):
    """Raised when the build list cannot be written to its store."""


class BuildListInvalidError(BuildListError):
    """Raised when a stored build list fails validation against the schema."""


class InventoryUnavailableError(InfrastructureError):
    """Raised when the scene inventory cannot be enumerated."""


# --- Application errors ---

class ProjectNotFoundError(ApplicationError):
    """Raised when the configured project root does not exist."""


class SettingsError(ScenesInBuildError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""
