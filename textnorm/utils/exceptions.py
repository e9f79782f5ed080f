from typing import Optional


class TextNormError(Exception):
    """Base error carrying a machine-readable code and a human message."""

    def __init__(self, code: str, message: Optional[str] = None):
        self.code = code
        self.message = message or "An error occurred"
        super().__init__(f"{self.code}: {self.message}")


class InvalidInputError(TextNormError, TypeError):
    """Input of the wrong type (e.g. non-string text)."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(code=code, message=message)


class InvalidOptionError(TextNormError, ValueError):
    """Unknown or malformed configuration."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(code=code, message=message)


class StopwordsNotFoundError(TextNormError, LookupError):
    """No stopword list is shipped for the requested language."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(code=code, message=message)
