# quillblog/api/endpoints/comments.py

import logging
from typing import List
from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from quillblog import crud, schemas
from quillblog.api import deps

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/{post_id}/comments", response_model=schemas.CommentCreated, status_code=201)
def add_comment(
    comment: schemas.CommentCreate,
    post_id: int = Path(..., title="The ID of the post to comment on", ge=1, le=deps.MAX_ID),
    db: Session = Depends(deps.get_db)
):
    db_comment = crud.create_comment(db=db, post_id=post_id, comment=comment)
    return {"comment_id": db_comment.id}


@router.get("/{post_id}/comments", response_model=List[schemas.Comment])
def read_comments(
    post_id: int = Path(..., title="The ID of the post", ge=1, le=deps.MAX_ID),
    db: Session = Depends(deps.get_db)
):
    # No existence check: an unknown post has no comments
    return crud.get_comments(db=db, post_id=post_id)
