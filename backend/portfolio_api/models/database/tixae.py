"""TIXAE reference data models."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, JSON

from portfolio_api.core.storage.database import Base


class TixaeApiEndpoint(Base):
    """Documentation entry for one TIXAE platform endpoint."""

    __tablename__ = "tixae_api_endpoints"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    method = Column(String(10), nullable=False)
    path = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=True)
    parameters = Column(JSON, default=dict, nullable=False)
    response_example = Column(JSON, nullable=True)


class TixaeAgentTemplate(Base):
    """Starter configuration for a TIXAE agent."""

    __tablename__ = "tixae_agent_templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=True)
    config = Column(JSON, default=dict, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
