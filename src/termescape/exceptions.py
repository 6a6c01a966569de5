"""Exception classes for termescape."""


class EscapeError(ValueError):
    """Base class for rendering errors."""

    message = "sequence specification"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{self.message}: {name!r}")


class UnknownSequenceError(EscapeError):
    """A symbolic name is neither in the theme nor in the style table."""

    message = "invalid sequence specification"


class CyclicSequenceError(EscapeError):
    """Theme aliases form a cycle on the resolution path of a name."""

    message = "cyclic sequence specification"
