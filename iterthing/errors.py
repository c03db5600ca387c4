"""Exceptions raised by iterthing."""


class EmptySequence(ValueError):
    """A value was demanded from a sequence that had no elements left."""

    def __init__(self, operation: str = "sequence"):
        self.operation = operation
        super().__init__(f"{operation}() called on an empty sequence")
