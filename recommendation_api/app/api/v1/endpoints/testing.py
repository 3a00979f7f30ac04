"""
End‑to‑end test helpers.

These routes let browser or API suites wipe the recommendations table
between runs.  They are mounted only when ``ENABLE_TEST_ROUTES`` is
set and must never be exposed in production.
"""

from fastapi import APIRouter, Depends, Response, status

from recommendation_api.app.api.v1.endpoints.recommendations import get_recommendation_service
from recommendation_api.app.services.recommendation_service import RecommendationService

router = APIRouter()


@router.post("/reset", status_code=status.HTTP_204_NO_CONTENT)
async def reset(service: RecommendationService = Depends(get_recommendation_service)) -> Response:
    """Delete every recommendation."""
    await service.reset()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
