"""Blog post database model."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, JSON

from portfolio_api.core.storage.database import Base


class BlogPost(Base):
    """Blog post model."""

    __tablename__ = "blog_posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True)
    excerpt = Column(Text, nullable=True)
    content = Column(Text, nullable=False)
    image_url = Column(String(500), nullable=True)
    author = Column(String(100), nullable=True)
    tags = Column(JSON, default=list, nullable=False)
    publish_date = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
