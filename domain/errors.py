"""
Domain Errors

Exceptions raised while turning raw text (data rows, range specs) into
domain models.
"""


class ParseError(ValueError):
    """
    Raised when a data row or a range specification cannot be parsed.

    Attributes:
        field: Name of the offending field (e.g. "BedsNumber")
        value: The raw text that failed to parse
        line_number: 1-based line number in the source file, if known
    """

    def __init__(self, message: str, field: str = "", value: str = "", line_number: int | None = None):
        super().__init__(message)
        self.field = field
        self.value = value
        self.line_number = line_number
