"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("")
async def health():
    """Basic health check."""
    return {"status": "healthy"}
