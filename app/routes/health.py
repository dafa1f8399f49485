import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, text

from app.database import get_session

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/health")
def health_check(session: Session = Depends(get_session)):
    try:
        # simple DB ping
        session.exec(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=500,
            content={"status": "Error", "database": "Disconnected"},
        )

    return {
        "status": "OK",
        "database": "Connected"
    }
