"""API key database model."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Boolean
from sqlalchemy.orm import relationship

from portfolio_api.core.storage.database import Base


class ApiKey(Base):
    """API key issued to a caller of the agent API."""

    __tablename__ = "api_keys"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(128), nullable=False, unique=True)
    name = Column(String(255), nullable=True)
    user_id = Column(String(100), nullable=False, index=True)
    active = Column(Boolean, default=True, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    last_used = Column(DateTime, nullable=True)

    # Relationships
    integrations = relationship(
        "AgentIntegration", back_populates="api_key", cascade="all, delete-orphan"
    )
    usage = relationship("ApiUsage", back_populates="api_key", cascade="all, delete-orphan")
