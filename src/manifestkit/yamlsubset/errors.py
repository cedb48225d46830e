"""Exceptions raised by the YAML subset engine."""


class YAMLSubsetError(ValueError):
    """Base error for the YAML subset engine.

    Errors that come from a specific source line carry its 1-based number.
    """

    def __init__(self, message: str, line_number: int | None = None):
        self.message = message
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class MalformedLineError(YAMLSubsetError):
    """Raised in strict mode for a line that is neither a mapping entry nor a sequence item."""
    pass


class YAMLIndentationError(YAMLSubsetError):
    """Raised in strict mode for tabs or indentation off the indent unit."""
    pass


class OrphanSequenceItemError(YAMLSubsetError):
    """Raised in strict mode for a sequence item with no enclosing sequence."""
    pass


class UnrepresentableValueError(YAMLSubsetError):
    """Raised by the encoder for values the subset cannot express."""
    pass


class DocumentTooLargeError(YAMLSubsetError):
    """Raised when a document exceeds the configured size bound."""
    pass
