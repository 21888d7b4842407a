# quillblog/schemas/comment.py

from pydantic import BaseModel, EmailStr, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime


class CommentCreate(BaseModel):
    author: str
    email: EmailStr
    content: str

    @field_validator("author")
    @classmethod
    def author_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Author name is required")
        return v

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Comment content is required")
        return v


class Comment(BaseModel):
    id: int
    author: str
    email: str
    content: str
    created_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class CommentCreated(BaseModel):
    message: str = "Comment added successfully"
    comment_id: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True
