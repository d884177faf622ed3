"""Exception taxonomy for extraction errors.

Both kinds are terminal for one extraction attempt: no partial result is
returned and the caller has to re-invoke with new input.
"""

from formmapper.enums import ExtractionErrorKind


class ExtractionError(Exception):
    """Base class for extraction errors."""

    kind: ExtractionErrorKind


class EmptyInputError(ExtractionError):
    """No HTML text was supplied (empty or whitespace only)."""

    kind = ExtractionErrorKind.EMPTY_INPUT

    def __init__(self, message: str = "No HTML content provided"):
        super().__init__(message)


class ParseFailureError(ExtractionError):
    """The text could not be turned into a traversable document.

    Also raised for unexpected failures while walking a parsed tree.
    """

    kind = ExtractionErrorKind.PARSE_FAILURE

    def __init__(self, message: str = "Failed to parse HTML"):
        super().__init__(message)
