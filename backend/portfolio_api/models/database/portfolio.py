"""Portfolio item database model."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, Boolean, JSON

from portfolio_api.core.storage.database import Base


class PortfolioItem(Base):
    """Portfolio item model."""

    __tablename__ = "portfolio_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(String(500), nullable=True)
    category = Column(String(100), nullable=True)
    link = Column(String(500), nullable=True)
    technologies = Column(JSON, default=list, nullable=False)  # list of tech names
    featured = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
