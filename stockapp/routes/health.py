from fastapi import APIRouter

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe, does not touch the database."""
    return {"status": "healthy", "service": "api"}
