"""Exception types raised by the cmodgen engine."""

from __future__ import annotations

__all__ = [
    "AlreadyExistsError",
    "ConfigError",
    "GuardCollisionError",
    "ScaffoldError",
    "WriteError",
]


class ScaffoldError(RuntimeError):
    """Base class for every failure reported by the generator."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(ScaffoldError):
    """Raised when the requested flags cannot be resolved into a context."""


class AlreadyExistsError(ScaffoldError, FileExistsError):
    """Raised when a planned file is already present on disk."""

    def __init__(self, path: str) -> None:
        super().__init__(f"{path} already exists")
        self.path = path


class WriteError(ScaffoldError):
    """Raised when a file cannot be created or fully written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path


class GuardCollisionError(ScaffoldError):
    """Raised in strict mode when two planned includes share a guard token."""

    def __init__(self, token: str, paths: tuple[str, ...]) -> None:
        joined = ", ".join(paths)
        super().__init__(f"guard {token} is shared by {joined}")
        self.token = token
        self.paths = paths
