"""Health check endpoint."""

from fastapi import APIRouter, Depends

from topic_picker.infrastructure.api.dependencies import Services, get_services

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(services: Services = Depends(get_services)):
    """Check API and store connectivity through the cache."""
    await services.cache.refresh()
    error = services.cache.last_error

    return {
        "status": "ok" if error is None else "degraded",
        "store": services.settings.store_backend.value,
        "store_error": error,
        "cached_assignments": len(services.cache.assignments),
        "service": "Trainer Topic Picker",
    }
