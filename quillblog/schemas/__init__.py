from .user import User, UserCreate, UserLogin, Token, Registered, CurrentUser
from .comment import Comment, CommentCreate, CommentCreated
from .post import PostCreate, PostUpdate, PostCreated, PostSummary, PostDetail
from .common import Message

__all__ = [
    "User", "UserCreate", "UserLogin", "Token", "Registered", "CurrentUser",
    "Comment", "CommentCreate", "CommentCreated",
    "PostCreate", "PostUpdate", "PostCreated", "PostSummary", "PostDetail",
    "Message",
]
