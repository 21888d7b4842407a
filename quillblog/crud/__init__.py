# quillblog/crud/__init__.py

from .crud_user import get_user, get_user_by_username, create_user, authenticate
from .crud_comment import create_comment, get_comments
from .crud_like import LikeOutcome, insert_like, like_post, get_like_count
from .crud_post import (
    derive_excerpt,
    render_content,
    create_post,
    get_posts,
    get_post,
    update_post,
    delete_post,
)

__all__ = [
    "get_user", "get_user_by_username", "create_user", "authenticate",
    "create_comment", "get_comments",
    "LikeOutcome", "insert_like", "like_post", "get_like_count",
    "derive_excerpt", "render_content",
    "create_post", "get_posts", "get_post", "update_post", "delete_post",
]
