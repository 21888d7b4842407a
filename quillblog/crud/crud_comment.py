# quillblog/crud/crud_comment.py
import logging
from typing import List
from sqlalchemy import desc
from sqlalchemy.orm import Session
from quillblog.core.errors import NotFound
from quillblog.models.comment import Comment
from quillblog.models.post import Post
from quillblog.schemas.comment import CommentCreate

logger = logging.getLogger(__name__)


def create_comment(db: Session, post_id: int, comment: CommentCreate) -> Comment:
    if db.query(Post.id).filter(Post.id == post_id).first() is None:
        logger.warning(f"Comment rejected, post {post_id} not found")
        raise NotFound("Post not found")

    db_comment = Comment(
        post_id=post_id,
        author=comment.author,
        email=comment.email,
        content=comment.content,
    )
    db.add(db_comment)
    db.commit()
    db.refresh(db_comment)
    logger.info(f"Comment {db_comment.id} added to post {post_id}")
    return db_comment


def get_comments(db: Session, post_id: int) -> List[Comment]:
    """Comments for a post, newest first. A missing post simply has none."""
    return db.query(Comment)\
             .filter(Comment.post_id == post_id)\
             .order_by(desc(Comment.created_at), desc(Comment.id))\
             .all()
