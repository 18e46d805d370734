"""
Exceptions shared by all layers.

Construction problems (bad configuration, bad placement string, unknown side token) are fatal:
the caller gets a ConfigurationError and no Board is created.
"""


class EngineError(Exception):
    """Base class for everything the move generator raises on purpose."""


class ConfigurationError(EngineError):
    """The configuration record or the position it describes cannot be used to build a Board."""


class RoundTripError(EngineError):
    """Taking back a move did not restore the board it was made on."""
