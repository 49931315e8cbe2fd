from .key_value_storage import SQLAlchemyKeyValueStorage

__all__ = [
    "SQLAlchemyKeyValueStorage",
]
