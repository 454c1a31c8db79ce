"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~swagcli.exceptions.SwagcliError` subclass.
Host scripts can inspect the exit code to tell a broken document apart from
a bad configuration without parsing stderr.
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_SPEC_PARSE_ERROR = 7
"""The API document could not be parsed."""

EXIT_UNSUPPORTED_DOCUMENT = 8
"""The API document is not a Swagger 2.x document."""

EXIT_REFERENCE_ERROR = 9
"""A path or ``$ref`` in the API document could not be resolved."""
