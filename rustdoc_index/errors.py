"""Exception types raised while decoding and resolving search indices."""


class SearchIndexDecodeError(ValueError):
    """Raised when a search-index payload cannot be decoded into typed records.

    This is fatal for the crate being decoded.
    """


class ItemResolutionError(ValueError):
    """Raised when a single raw item cannot be resolved.

    Recoverable: the item is dropped and the rest of the batch continues.
    """


class ConfigError(ValueError):
    """Raised for invalid configuration values."""
