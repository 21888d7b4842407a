# quillblog/api/endpoints/posts.py

import logging
from typing import List
from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from quillblog import crud, schemas
from quillblog.api import deps

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[schemas.PostSummary])
def read_posts(db: Session = Depends(deps.get_db)):
    return crud.get_posts(db)


@router.post("", response_model=schemas.PostCreated, status_code=201)
def create_post(
    post: schemas.PostCreate,
    current_user: schemas.CurrentUser = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db)
):
    logger.info(f"User {current_user.id} creating post: {post.title}")
    db_post = crud.create_post(db=db, user_id=current_user.id, post=post)
    return {"post_id": db_post.id}


@router.get("/{post_id}", response_model=schemas.PostDetail)
def read_post(
    post_id: int = Path(..., title="The ID of the post to read", ge=1, le=deps.MAX_ID),
    db: Session = Depends(deps.get_db)
):
    """Get a post with its comments. Every call counts as a view."""
    return crud.get_post(db=db, post_id=post_id)


@router.put("/{post_id}", response_model=schemas.Message)
def update_post(
    post: schemas.PostUpdate,
    post_id: int = Path(..., title="The ID of the post to update", ge=1, le=deps.MAX_ID),
    current_user: schemas.CurrentUser = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db)
):
    crud.update_post(db=db, post_id=post_id, user_id=current_user.id, post=post)
    return {"message": "Post updated successfully"}


@router.delete("/{post_id}", response_model=schemas.Message)
def delete_post(
    post_id: int = Path(..., title="The ID of the post to delete", ge=1, le=deps.MAX_ID),
    current_user: schemas.CurrentUser = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db)
):
    crud.delete_post(db=db, post_id=post_id, user_id=current_user.id)
    return {"message": "Post deleted successfully"}


@router.post("/{post_id}/like", response_model=schemas.Message)
def like_post(
    post_id: int = Path(..., title="The ID of the post to like", ge=1, le=deps.MAX_ID),
    client_ip: str = Depends(deps.get_client_ip),
    db: Session = Depends(deps.get_db)
):
    """Record an anonymous like, one per source address"""
    crud.like_post(db=db, post_id=post_id, ip_address=client_ip)
    return {"message": "Post liked successfully"}
