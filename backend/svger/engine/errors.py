"""Typed failures raised by the generation engine and its collaborators.

The engine raises; the orchestrator catches per file and turns the failure
into a result entry. ``MalformedMarkupWarning`` is never raised, it is
collected on the normalization result.
"""

from __future__ import annotations


class SvgerError(Exception):
    """Base class for every failure the engine reports."""

    code = "SVGER_ERROR"

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class SourceNotFoundError(SvgerError):
    code = "SOURCE_NOT_FOUND"


class UnsupportedFrameworkError(SvgerError):
    code = "UNSUPPORTED_FRAMEWORK"

    def __init__(self, target: object, *, path: str | None = None) -> None:
        super().__init__(f"Unsupported framework: {target}", path=path)
        self.target = target


class WriteError(SvgerError):
    code = "WRITE_ERROR"


class DuplicateIdentifierError(SvgerError):
    """Two sources in one build derive the same component name."""

    code = "DUPLICATE_IDENTIFIER"


class ConfigError(SvgerError):
    code = "CONFIG_ERROR"


class MalformedMarkupWarning(UserWarning):
    """Markup could not be unwrapped; it is passed through best-effort."""
