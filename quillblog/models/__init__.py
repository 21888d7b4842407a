from quillblog.models.user import User
from quillblog.models.post import Post
from quillblog.models.like import Like
from quillblog.models.comment import Comment

__all__ = [
    "User",
    "Post",
    "Like",
    "Comment",
]
