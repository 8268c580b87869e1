class StoreError(RuntimeError):
    """Raised when the restaurant data store fails (catalog read or transaction write)."""
    pass


class StateStoreError(RuntimeError):
    """Raised when conversation session state cannot be loaded or persisted."""
    pass


class SelectionError(ValueError):
    """Raised when a restaurant pick does not resolve against the current listing."""
    pass
