# Import all models so Base.metadata knows every table before create_all
from quillblog.db.base_class import Base
from quillblog.models.user import User
from quillblog.models.post import Post
from quillblog.models.like import Like
from quillblog.models.comment import Comment

__all__ = ["Base", "User", "Post", "Like", "Comment"]
