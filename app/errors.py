"""Cache errors."""


class LineageCacheError(Exception):
    """Base error for the lineage cache."""

    def __init__(self, message: str = "Lineage cache error"):
        self.message = message
        super().__init__(self.message)


class CacheConnectionError(LineageCacheError, ConnectionError):
    """Cache store unreachable."""

    def __init__(self, message: str = "Cache store unreachable"):
        super().__init__(message)


class UpstreamFetchError(LineageCacheError):
    """Upstream metadata service request failed."""

    def __init__(self, message: str = "Upstream fetch failed"):
        super().__init__(message)


class StoreWriteError(LineageCacheError):
    """Writing a record to the cache store failed."""

    def __init__(self, message: str = "Cache store write failed"):
        super().__init__(message)


class StoreReadError(LineageCacheError):
    """Reading a record from the cache store failed."""

    def __init__(self, message: str = "Cache store read failed"):
        super().__init__(message)


class NotFoundError(LineageCacheError):
    """Key not present in the cache."""

    def __init__(self, message: str = "Key not found in cache"):
        super().__init__(message)
