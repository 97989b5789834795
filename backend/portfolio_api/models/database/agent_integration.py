"""Agent integration database model."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from portfolio_api.core.storage.database import Base


class AgentIntegration(Base):
    """A domain allowed to call the agent API with a given key."""

    __tablename__ = "agent_integrations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    agent_id = Column(String(100), nullable=False, index=True)
    api_key_id = Column(
        Integer, ForeignKey("api_keys.id", ondelete="CASCADE"), nullable=False, index=True
    )
    domain = Column(String(255), nullable=False)  # example.com or *.example.com
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    api_key = relationship("ApiKey", back_populates="integrations")
