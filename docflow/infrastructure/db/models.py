"""
Database Models — SQLAlchemy.

Tables:
  - records: one row per entity record, grouped by collection,
    ordered by insertion position. The record itself is the JSON payload.
"""

from sqlalchemy import Column, Integer, String, JSON, Index
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class RecordRow(Base):
    """Stores one record of a Record Store collection."""
    __tablename__ = "records"

    collection = Column(String(50), primary_key=True)
    position = Column(Integer, primary_key=True)
    record_id = Column(String(64), nullable=True)
    payload = Column(JSON, nullable=False)

    __table_args__ = (
        Index("ix_records_collection_record_id", "collection", "record_id"),
    )

    def __repr__(self):
        return f"<Record {self.collection}[{self.position}] id={self.record_id}>"
