"""Error types raised by the bootstrap pipeline.

Every error is terminal for the current run: each one stems from an input the
operator can fix (wrong alias, missing directory, bad permissions), so nothing
here is retried.
"""

from __future__ import annotations


class BootstrapError(Exception):
    """Base exception for all controller-bootstrap errors."""

    code: str = "BOOTSTRAP-UNKNOWN"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class ModelNotFoundError(BootstrapError):
    """No usable model version directory for the requested service."""

    code = "BOOTSTRAP-NOT-FOUND"


class ModelParseError(BootstrapError):
    """The model file is missing, unreadable or malformed."""

    code = "BOOTSTRAP-MODEL"


class ConfigError(BootstrapError):
    code = "BOOTSTRAP-CONFIG"


class TemplateError(BootstrapError):
    """A template could not be parsed or referenced an undefined variable."""

    code = "BOOTSTRAP-TEMPLATE"


class NotWritableError(BootstrapError):
    code = "BOOTSTRAP-NOT-WRITABLE"


class RepositoryError(BootstrapError):
    """The upstream model repository could not be cloned."""

    code = "BOOTSTRAP-REPO"
