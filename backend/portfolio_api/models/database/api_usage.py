"""API usage database model."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship

from portfolio_api.core.storage.database import Base


class ApiUsage(Base):
    """One completed request made with an API key."""

    __tablename__ = "api_usage"

    id = Column(Integer, primary_key=True, autoincrement=True)
    api_key_id = Column(
        Integer, ForeignKey("api_keys.id", ondelete="CASCADE"), nullable=False, index=True
    )
    method = Column(String(10), nullable=True)
    endpoint = Column(String(2048), nullable=False)
    status_code = Column(String(3), nullable=False)
    request_payload = Column(JSON, nullable=True)  # None for GET requests
    timestamp = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    api_key = relationship("ApiKey", back_populates="usage")
