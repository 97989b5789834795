"""User database model."""

from sqlalchemy import Column, Integer, String

from portfolio_api.core.storage.database import Base


class User(Base):
    """Site user model."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=False, unique=True)
    password = Column(String(255), nullable=False)
