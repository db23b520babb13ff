from fastapi import APIRouter

from semant.services.executors import registry

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict:
    return {"status": "ok", "providers": registry.providers()}
