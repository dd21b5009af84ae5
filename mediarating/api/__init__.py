# mediarating/api/__init__.py

from fastapi import APIRouter
from . import users, media, ratings, comments, rankings, system

api_router = APIRouter()

api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(media.router, prefix="/media", tags=["media"])
api_router.include_router(ratings.router, prefix="/ratings", tags=["ratings"])
api_router.include_router(comments.router, prefix="/comments", tags=["comments"])
api_router.include_router(rankings.router, tags=["rankings"])
api_router.include_router(system.router, tags=["system"])
