"""Exception classes for Cortado.

Provides standardized exceptions for error handling throughout Cortado.
Each category also derives from the closest builtin so callers can catch
``ValueError``/``IndexError``/``TypeError`` without importing Cortado.
"""

from __future__ import annotations


class CortadoError(Exception):
    """Base exception for all Cortado errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigurationError(CortadoError, ValueError):
    """Invalid configuration passed to a tokenizer, matcher or generator.

    Raised immediately by the call that introduces the bad value
    (range bounds, lengths, matcher arguments), never deferred to scan time.
    """

    def __init__(self, message: str, parameter: str | None = None) -> None:
        """Initialize configuration error.

        Args:
            message: Description of the problem
            parameter: Name of the offending parameter (optional)
        """
        self.parameter = parameter
        prefix = f"{parameter}: " if parameter else ""
        super().__init__(f"{prefix}{message}")


class NoSuchTokenError(CortadoError, IndexError):
    """Cursor moved past either end of the token list.

    The non-raising accessors (``next_token``/``previous_token``) return
    ``None`` at the same boundaries instead.
    """

    def __init__(self, message: str, index: int | None = None, size: int | None = None) -> None:
        """Initialize traversal error.

        Args:
            message: Error description
            index: Cursor index at the time of the failure (optional)
            size: Number of tokens available (optional)
        """
        self.index = index
        self.size = size

        location = ""
        if index is not None and size is not None:
            location = f" (index {index}, size {size})"
        super().__init__(f"{message}{location}")


class UnsupportedMutationError(CortadoError, TypeError):
    """Structural mutation attempted on a read-only token sequence."""

    def __init__(self, operation: str) -> None:
        """Initialize mutation error.

        Args:
            operation: Name of the rejected operation (e.g., "insert")
        """
        self.operation = operation
        super().__init__(f"'{operation}' is not supported on a read-only token sequence")


class DuplicationError(CortadoError):
    """Copying a tokenizer failed."""

    pass
