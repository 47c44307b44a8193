"""Exceptions raised by the listings package."""


class ListingsError(Exception):
    """Base class for all listings errors."""


class PositionalArgumentIndexError(ListingsError, IndexError):
    """Raised by the strict positional accessor for an index past the end."""

    def __init__(self, index: int, length: int):
        super().__init__(
            f"Positional argument {index} requested, template has {length}"
        )
        self.index = index
        self.length = length


class RecursionLimitExceeded(ListingsError, RecursionError):
    """Template or markup nesting deeper than the configured cap."""

    def __init__(self, max_depth: int):
        super().__init__(f"Nesting deeper than {max_depth} levels")
        self.max_depth = max_depth


class ConfigError(ListingsError, ValueError):
    """Invalid configuration file or values."""
