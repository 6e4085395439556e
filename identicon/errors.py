class IdenticonError(Exception):
    """Base class for every error raised while generating an identicon."""


class InvalidInput(IdenticonError, ValueError):
    """Hash bytes (or a grid row) are too short to derive what was asked for."""


class RenderFailure(IdenticonError, RuntimeError):
    """The canvas could not be allocated, drawn on, or encoded."""


class PersistenceFailure(IdenticonError, OSError):
    """The encoded image could not be written to storage."""
