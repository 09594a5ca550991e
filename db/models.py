from sqlalchemy import Column, Integer, String, Boolean, JSON, DateTime

from .database import Base


class ScanHistory(Base):
    __tablename__ = "scan_history"

    id = Column(Integer, primary_key=True, index=True)
    snapshot_id = Column(String(36), unique=True, index=True, nullable=False)
    product_id = Column(String(64), index=True, nullable=False)
    product_name = Column(String(255), nullable=False)
    eco_score = Column(Integer, nullable=False)
    decision = Column(String(32), nullable=False)
    is_local = Column(Boolean, default=False)
    scan_date = Column(DateTime(timezone=True), nullable=False, index=True)

    # full snapshot in its durable JSON shape
    payload = Column(JSON, nullable=False)
