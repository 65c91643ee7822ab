# File: chronoboard/api/v1/routes_health.py

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chronoboard.api.deps import get_db
from chronoboard.core.config import settings
from chronoboard.core.logging_config import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health")
def health(db: Session = Depends(get_db)):
    """Service status plus a database ping."""
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as exc:
        logger.error("Database ping failed: %s", exc)
        database = "unavailable"

    return {
        "status": "ok" if database == "ok" else "degraded",
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "database": database,
    }
