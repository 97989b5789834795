"""Contact message database model."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text

from portfolio_api.core.storage.database import Base


class Message(Base):
    """Message submitted through the contact form."""

    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=True)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
