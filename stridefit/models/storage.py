from datetime import datetime
from sqlalchemy import String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column
from stridefit.core.database import Base


class KeyValueEntry(Base):
    """One persisted value of the local key/value medium."""
    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(String(200), primary_key=True)

    # Serialized JSON document, opaque to the medium
    value: Mapped[str] = mapped_column(Text, nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
