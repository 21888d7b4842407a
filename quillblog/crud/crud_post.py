# quillblog/crud/crud_post.py

from typing import List, Optional
import logging
import markdown2
from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session
from quillblog.core.config import settings
from quillblog.core.errors import Forbidden, NotFound
from quillblog.models.comment import Comment
from quillblog.models.like import Like
from quillblog.models.post import Post
from quillblog.models.user import User
from quillblog.schemas.post import PostCreate, PostUpdate
from quillblog.crud.crud_comment import get_comments
from quillblog.crud.crud_user import get_user

logger = logging.getLogger(__name__)


def derive_excerpt(content: str, excerpt: Optional[str] = None) -> str:
    """Use the author's excerpt when given, else the head of the content."""
    if excerpt:
        return excerpt
    return content[:settings.EXCERPT_LENGTH]


def render_content(content: str) -> str:
    return markdown2.markdown(content, extras=[
        'fenced-code-blocks',
        'header-ids',
        'tables',
        'break-on-newline',
        'cuddled-lists'
    ])


def _like_count():
    return select(func.count(Like.id)).where(Like.post_id == Post.id).correlate(Post).scalar_subquery()


def _comment_count():
    return select(func.count(Comment.id)).where(Comment.post_id == Post.id).correlate(Post).scalar_subquery()


def _get_owned_post(db: Session, post_id: int, user_id: int) -> Post:
    post = db.query(Post).filter(Post.id == post_id).first()
    if post is None:
        logger.warning(f"Post {post_id} not found")
        raise NotFound("Post not found")
    if post.user_id != user_id:
        logger.warning(f"User {user_id} is not the owner of post {post_id}")
        raise Forbidden("Not authorized")
    return post


def create_post(db: Session, user_id: int, post: PostCreate) -> Post:
    """
    Create a post owned by the given user.

    The user is looked up again because a token can outlive its account.

    Raises:
        NotFound: the user no longer exists
    """
    if get_user(db, user_id) is None:
        logger.warning(f"Rejected post creation for missing user {user_id}")
        raise NotFound("User not found. Please re-login.")

    db_post = Post(
        user_id=user_id,
        title=post.title,
        content=post.content,
        excerpt=derive_excerpt(post.content, post.excerpt),
    )
    db.add(db_post)
    db.commit()
    db.refresh(db_post)
    logger.info(f"Post created successfully. ID: {db_post.id}")
    return db_post


def get_posts(db: Session) -> List[dict]:
    """Get every post, newest first, with owner name and engagement counts"""
    rows = db.query(
        Post.id,
        Post.title,
        Post.excerpt,
        Post.views,
        Post.created_at,
        Post.updated_at,
        User.username,
        _like_count().label("likes"),
        _comment_count().label("comments"),
    ).join(User, Post.user_id == User.id)\
     .order_by(desc(Post.created_at), desc(Post.id))\
     .all()
    logger.info(f"Retrieved {len(rows)} posts")
    return [row._asdict() for row in rows]


def get_post(db: Session, post_id: int) -> dict:
    """
    Get a single post with its comments, counting the read as a view.

    Every call increments the view counter, whoever the reader is.

    Args:
        db: Database session
        post_id: ID of the post

    Returns:
        dict: Post fields, owner username, like and comment counts and comments

    Raises:
        NotFound: no post has this ID
    """
    updated = db.query(Post)\
                .filter(Post.id == post_id)\
                .update({Post.views: Post.views + 1}, synchronize_session=False)
    if not updated:
        db.rollback()
        logger.warning(f"Post {post_id} not found")
        raise NotFound("Post not found")
    db.commit()

    row = db.query(
        Post.id,
        Post.title,
        Post.content,
        Post.excerpt,
        Post.views,
        Post.created_at,
        Post.updated_at,
        User.username,
        _like_count().label("likes"),
        _comment_count().label("comment_count"),
    ).join(User, Post.user_id == User.id)\
     .filter(Post.id == post_id)\
     .first()
    if row is None:
        # Deleted between the increment and the read
        raise NotFound("Post not found")

    post = row._asdict()
    post["content_html"] = render_content(post["content"])
    post["comments"] = get_comments(db, post_id)
    return post


def update_post(db: Session, post_id: int, user_id: int, post: PostUpdate) -> Post:
    db_post = _get_owned_post(db, post_id, user_id)
    db_post.title = post.title
    db_post.content = post.content
    db_post.excerpt = derive_excerpt(post.content, post.excerpt)
    db.commit()
    db.refresh(db_post)
    logger.info(f"Post {post_id} updated by user {user_id}")
    return db_post


def delete_post(db: Session, post_id: int, user_id: int) -> None:
    """Delete a post; its likes and comments go with it via ON DELETE CASCADE"""
    db_post = _get_owned_post(db, post_id, user_id)
    db.delete(db_post)
    db.commit()
    logger.info(f"Post {post_id} deleted by user {user_id}")
