"""
Top‑level router for version 1 of the API.

``router`` carries the public endpoints.  ``testing_router`` holds the
end‑to‑end helpers and is only mounted by ``create_app`` when
``settings.enable_test_routes`` is set.
"""

from fastapi import APIRouter

from .endpoints import health, recommendations, testing

router = APIRouter()

router.include_router(recommendations.router, prefix="/recommendations", tags=["recommendations"])
router.include_router(health.router, prefix="/health", tags=["health"])

testing_router = APIRouter()
testing_router.include_router(testing.router, prefix="/e2e", tags=["e2e"])
