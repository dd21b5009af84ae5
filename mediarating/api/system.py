# mediarating/api/system.py

from fastapi import APIRouter, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from mediarating.database import engine
from mediarating.core.config import get_settings

router = APIRouter()


@router.get("/health")
def health_check():
    """Service health check"""
    return {"status": "healthy", "service": get_settings().app_name}


@router.get("/db/ping")
def ping_db():
    """Database connectivity check"""
    try:
        with engine.connect() as connection:
            result = connection.execute(text("SELECT 1"))
            return {"status": "ok", "result": result.scalar()}
    except SQLAlchemyError as e:
        raise HTTPException(status_code=503, detail=f"database unavailable: {e}")
