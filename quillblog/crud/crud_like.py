# quillblog/crud/crud_like.py
import enum
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from quillblog.core.errors import DuplicateEngagement, NotFound
from quillblog.models.like import Like
from quillblog.models.post import Post

logger = logging.getLogger(__name__)


class LikeOutcome(enum.Enum):
    CREATED = "created"
    DUPLICATE = "duplicate"


def insert_like(db: Session, post_id: int, ip_address: str) -> LikeOutcome:
    """
    Insert a like and report whether the unique constraint rejected it.

    No existence pre-check is made for the (post, address) pair; the
    constraint is the only guard against concurrent duplicates.
    """
    db.add(Like(post_id=post_id, ip_address=ip_address))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return LikeOutcome.DUPLICATE
    return LikeOutcome.CREATED


def like_post(db: Session, post_id: int, ip_address: str) -> None:
    if db.query(Post.id).filter(Post.id == post_id).first() is None:
        logger.warning(f"Like rejected, post {post_id} not found")
        raise NotFound("Post not found")

    if insert_like(db, post_id, ip_address) is LikeOutcome.DUPLICATE:
        logger.info(f"Duplicate like on post {post_id} from {ip_address}")
        raise DuplicateEngagement("Already liked this post")
    logger.info(f"Post {post_id} liked from {ip_address}")


def get_like_count(db: Session, post_id: int) -> int:
    return db.query(Like).filter(Like.post_id == post_id).count()
