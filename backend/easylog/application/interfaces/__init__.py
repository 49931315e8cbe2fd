from .key_value_storage import KeyValueStorage

__all__ = [
    "KeyValueStorage",
]
