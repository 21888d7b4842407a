# quillblog/api/endpoints/auth.py

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from quillblog import crud, schemas
from quillblog.api import deps
from quillblog.core.errors import Unauthenticated
from quillblog.core.security import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=schemas.Registered, status_code=201)
def register(user: schemas.UserCreate, db: Session = Depends(deps.get_db)):
    logger.info(f"Received registration request for: {user.username}")
    db_user = crud.create_user(db=db, user=user)
    token = create_access_token(db_user.id, db_user.username)
    return {"token": token, "user": db_user}


@router.post("/login", response_model=schemas.Token)
def login(credentials: schemas.UserLogin, db: Session = Depends(deps.get_db)):
    db_user = crud.authenticate(db, username=credentials.username, password=credentials.password)
    if db_user is None:
        raise Unauthenticated("Invalid credentials")
    logger.info(f"User {db_user.id} logged in")
    return {"token": create_access_token(db_user.id, db_user.username), "user": db_user}
