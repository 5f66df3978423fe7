"""Health check API endpoint."""

from fastapi import APIRouter

from jobly.db.session import check_connection

router = APIRouter(tags=["Health"])


@router.get("")
async def health_check():
    """Service liveness plus a database round trip."""
    database_ok = check_connection()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "ok" if database_ok else "unavailable",
    }
