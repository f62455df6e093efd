from stridefit.models.storage import KeyValueEntry

__all__ = [
    "KeyValueEntry",
]
