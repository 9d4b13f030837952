"""
Unified exception hierarchy for memberdoc.

All errors raised by the toolkit derive from DocError, so callers can catch
every documentation failure with a single except clause while still being
able to tell configuration problems from build failures.
"""

from typing import Any


class DocError(Exception):
    """
    Base exception for all memberdoc errors.

    Example:
        try:
            builder.build(page)
        except DocError as e:
            lg.error("documentation failed", extra={"exception": e})
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(DocError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found or too large
        - Invalid YAML syntax
        - Unknown option or invalid option value
        - Unresolvable ${variable} reference
    """

    pass


class ModelError(DocError):
    """
    Declaration model errors.

    Raised when a model document cannot be turned into type and member
    elements (missing names, unknown element kinds, wrong shapes).
    """

    pass


class BuildError(DocError):
    """
    Documentation build failure.

    Raised by the collaborators of a builder (member resolution, writers).
    Builders never catch it: the whole build pass unwinds.
    """

    pass


class ResolutionError(BuildError):
    """Raised when visible members cannot be computed for a type."""

    pass


class WriterError(BuildError):
    """Raised when a writer cannot render an element."""

    pass
