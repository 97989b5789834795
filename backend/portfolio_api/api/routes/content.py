"""Portfolio, blog and contact API routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.api.auth import require_admin_key
from portfolio_api.core.storage.base import Storage
from portfolio_api.core.storage.database_storage import get_storage
from portfolio_api.models.schemas import (
    PortfolioItemCreate,
    PortfolioItemResponse,
    BlogPostCreate,
    BlogPostResponse,
    MessageCreate,
    MessageResponse,
)

router = APIRouter(tags=["content"])
admin_router = APIRouter(
    prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin_key)]
)


# Portfolio endpoints
@router.get("/portfolio", response_model=list[PortfolioItemResponse])
async def list_portfolio_items(storage: Storage = Depends(get_storage)):
    """List all portfolio items."""
    return await storage.get_portfolio_items()


@router.get("/portfolio/{item_id}", response_model=PortfolioItemResponse)
async def get_portfolio_item(item_id: int, storage: Storage = Depends(get_storage)):
    """Get a portfolio item by ID."""
    item = await storage.get_portfolio_item(item_id)
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Portfolio item with id {item_id} not found",
        )
    return item


# Blog endpoints
@router.get("/blog", response_model=list[BlogPostResponse])
async def list_blog_posts(storage: Storage = Depends(get_storage)):
    """List blog posts, newest first."""
    return await storage.get_blog_posts()


@router.get("/blog/{post_id}", response_model=BlogPostResponse)
async def get_blog_post(post_id: int, storage: Storage = Depends(get_storage)):
    """Get a blog post by ID."""
    post = await storage.get_blog_post(post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Blog post with id {post_id} not found",
        )
    return post


# Contact endpoint
@router.post("/contact", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def submit_message(
    message_data: MessageCreate,
    storage: Storage = Depends(get_storage),
):
    """Store a contact form submission."""
    return await storage.create_message(message_data)


# Publishing (admin keys only)
@admin_router.post("/portfolio", response_model=PortfolioItemResponse, status_code=status.HTTP_201_CREATED)
async def create_portfolio_item(
    item_data: PortfolioItemCreate,
    storage: Storage = Depends(get_storage),
):
    """Create a portfolio item."""
    return await storage.create_portfolio_item(item_data)


@admin_router.post("/blog", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED)
async def create_blog_post(
    post_data: BlogPostCreate,
    storage: Storage = Depends(get_storage),
):
    """Create a blog post."""
    return await storage.create_blog_post(post_data)
