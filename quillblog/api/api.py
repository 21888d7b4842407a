# quillblog/api/api.py

import logging
from fastapi import APIRouter
from quillblog.api.endpoints import auth, posts, comments

logger = logging.getLogger(__name__)

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(posts.router, prefix="/posts", tags=["posts"])
api_router.include_router(comments.router, prefix="/posts", tags=["comments"])

logger.info(f"API routes configured: {[route.path for route in api_router.routes]}")
