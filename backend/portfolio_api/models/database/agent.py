"""Agent database model."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, JSON

from portfolio_api.core.storage.database import Base


class Agent(Base):
    """Voice/chat agent registered by a user."""

    __tablename__ = "agents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    agent_id = Column(String(100), nullable=False, unique=True)  # external agent identifier
    user_id = Column(String(100), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(50), default="active", nullable=False)
    config = Column(JSON, default=dict, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
