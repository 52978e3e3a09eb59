"""Parser error types."""


class ParseError(Exception):
    """Raised when a value expression cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class TokenError(ParseError):
    """Raised when serialized token data does not describe a valid token tree."""

    def __init__(self, message: str, path: str = "$"):
        self.path = path
        super().__init__(f"{path}: {message}")
