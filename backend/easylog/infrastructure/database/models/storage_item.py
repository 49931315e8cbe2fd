"""SQLAlchemy ORM model for one key of the journal's storage scope."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from easylog.infrastructure.database.base import Base


class StorageItemModel(Base):
    """ORM model — maps to the 'storage_items' table."""

    __tablename__ = "storage_items"

    key: Mapped[str] = mapped_column(Text, primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<StorageItemModel(key='{self.key}', size={len(self.value)})>"
