"""Regex compile errors."""


class CompileError(Exception):
    """Base class for errors raised while compiling a regex."""

    def __init__(self, message: str = "", position: int | None = None):
        self.message = message
        self.position = position
        super().__init__(message)


class InvalidQuantifierPosition(CompileError):
    """A quantifier has no atom before it to govern."""

    def __init__(self, quantifier: str, position: int):
        self.quantifier = quantifier
        super().__init__(f"invalid quantifier position: '{quantifier}' at {position}", position)
