"""SQLAlchemy ORM model definitions."""

from datetime import datetime

from sqlalchemy import Column, String, DateTime, JSON

from bankstore.store.sqlalchemy.database import Base


class DocumentORM(Base):
    """One JSON document, addressed like a partitioned container item."""

    __tablename__ = "documents"

    database_name = Column(String(255), primary_key=True)
    container_name = Column(String(255), primary_key=True)
    partition_key = Column(String(255), primary_key=True)
    item_id = Column(String(255), primary_key=True)
    body = Column(JSON, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=True, onupdate=datetime.utcnow)
