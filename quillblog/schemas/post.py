# quillblog/schemas/post.py

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional, List

from quillblog.schemas.comment import Comment


class PostBase(BaseModel):
    """Base schema for posts"""
    title: str = Field(..., max_length=255)
    content: str
    excerpt: Optional[str] = Field(default=None, max_length=500)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        return v

    @field_validator("content")
    @classmethod
    def content_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Content is required")
        return v


class PostCreate(PostBase):
    """Schema for creating posts"""
    pass


class PostUpdate(PostBase):
    """Schema for replacing a post's title, content and excerpt"""
    pass


class PostCreated(BaseModel):
    message: str = "Post created successfully"
    post_id: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PostSummary(BaseModel):
    """Schema for a post as it appears in the listing"""
    id: int
    title: str
    excerpt: Optional[str] = None
    views: int = 0
    likes: int = 0
    comments: int = 0
    username: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class PostDetail(BaseModel):
    """Schema for a single post with its comments"""
    id: int
    title: str
    content: str
    content_html: str
    excerpt: Optional[str] = None
    views: int = 0
    likes: int = 0
    comment_count: int = 0
    username: str
    created_at: datetime
    updated_at: datetime
    comments: List[Comment] = []

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
