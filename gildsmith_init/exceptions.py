"""Central application exception hierarchy.

This module defines the base application exception ``AppError`` and the
specialized subclasses raised by the setup helpers: manifest lookup,
manifest parsing and manifest writing failures. Steps catch these, report
them to the user and keep the run going, so every error carries a stable
machine-readable code and a log-safe context mapping.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base exception for all application-level errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'MANIFEST_NOT_FOUND'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging.
    transient : bool, optional
        Whether the error is temporary and a re-run may succeed.

    Attributes
    ----------
    code : str
        Stable machine-readable error code.
    message : str
        Human-readable message.
    context : dict
        Structured, non-sensitive context for logging.
    transient : bool
        True if the error is transient.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'k': 'v'}, transient=True)
    >>> e.code
    'CODE'
    """

    __slots__ = ("code", "message", "context", "transient")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class ManifestNotFoundError(AppError):
    """Raised when a manifest file expected inside the project is absent."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "MANIFEST_NOT_FOUND", message, context=context, transient=False
        )


class ManifestFormatError(AppError):
    """Raised for manifests that are not valid JSON or have an unexpected shape."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "MANIFEST_FORMAT_ERROR", message, context=context, transient=False
        )


class ManifestWriteError(AppError):
    """Raised when a merged manifest cannot be written back to disk."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "MANIFEST_WRITE_ERROR", message, context=context, transient=True
        )
