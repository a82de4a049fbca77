"""Health endpoint."""

from fastapi import APIRouter

from ..schemas import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health():
    """Liveness probe. Always ok while the process is running."""
    return HealthOut()
