"""Exception hierarchy for swagcli.

All exceptions inherit from :class:`SwagcliError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`swagcli.exit_codes`.

Subclass hierarchy::

    SwagcliError (exit 1)
    +-- InvalidUsageError         (exit 2)
    +-- SpecParseError            (exit 7)
    +-- UnsupportedDocumentError  (exit 8)
    +-- ReferenceResolutionError  (exit 9)
    +-- AutoConfigDecodeError     (exit 1)
    +-- ConfigError               (exit 1)

Structural errors (parse, version, reference) abort compilation of a whole
document.  :class:`AutoConfigDecodeError` is only ever raised internally and
absorbed by :func:`~swagcli.compiler.autoconfig.load_auto_config`.
"""

from swagcli.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_REFERENCE_ERROR,
    EXIT_SPEC_PARSE_ERROR,
    EXIT_UNSUPPORTED_DOCUMENT,
)


class SwagcliError(Exception):
    """Base exception for all swagcli errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(SwagcliError):
    """Raised for invalid CLI arguments (e.g. an unknown operation name)."""

    exit_code = EXIT_INVALID_USAGE


class SpecParseError(SwagcliError):
    """Raised when the document text is neither valid JSON nor valid YAML."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class UnsupportedDocumentError(SwagcliError):
    """Raised when the document does not declare a Swagger 2.x version."""

    exit_code = EXIT_UNSUPPORTED_DOCUMENT


class ReferenceResolutionError(SwagcliError):
    """Raised when a path or ``$ref`` cannot be resolved against the document."""

    exit_code = EXIT_REFERENCE_ERROR


class AutoConfigDecodeError(SwagcliError):
    """Raised when the ``x-cli-config`` extension does not have the expected shape."""


class ConfigError(SwagcliError):
    """Raised for configuration problems (invalid JSON, bad values)."""
