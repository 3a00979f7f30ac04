"""
Recommendation endpoints for API v1.

These routes let clients submit recommendations, vote on them and
browse them.  Request bodies are validated by pydantic (422 on bad
input); domain errors raised by ``RecommendationService`` are mapped
to 409 (duplicate name) and 404 (unknown id).

``/random`` and ``/top/{amount}`` are declared before ``/{recommendation_id}``
so they are not captured by the id route.
"""

import sqlite3
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, status

from recommendation_api.app.core.db import get_db
from recommendation_api.app.core.errors import ConflictError, NotFoundError
from recommendation_api.app.repositories.recommendation_repository import RecommendationRepository
from recommendation_api.app.schemas.recommendation import RecommendationCreate, RecommendationRead
from recommendation_api.app.services.recommendation_service import RecommendationService

router = APIRouter()


def get_recommendation_service(conn: sqlite3.Connection = Depends(get_db)) -> RecommendationService:
    """Build a service bound to the request's database connection."""
    return RecommendationService(RecommendationRepository(conn))


@router.post("", response_model=RecommendationRead, status_code=status.HTTP_201_CREATED)
async def create_recommendation(
    recommendation: RecommendationCreate,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationRead:
    """Create a recommendation with a score of 0.

    Returns 409 if the name is already in use.
    """
    try:
        return await service.create(recommendation)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e


@router.get("", response_model=List[RecommendationRead])
async def list_recommendations(
    service: RecommendationService = Depends(get_recommendation_service),
) -> List[RecommendationRead]:
    """Return the most recent recommendations, newest first."""
    return await service.list_recent()


@router.get("/random", response_model=RecommendationRead)
async def get_random_recommendation(
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationRead:
    """Return one recommendation, favouring well scored ones.

    Returns 404 when there are no recommendations.
    """
    try:
        return await service.get_random()
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/top/{amount}", response_model=List[RecommendationRead])
async def get_top_recommendations(
    amount: int = Path(..., ge=1),
    service: RecommendationService = Depends(get_recommendation_service),
) -> List[RecommendationRead]:
    """Return up to ``amount`` recommendations ordered by score."""
    return await service.get_top(amount)


@router.get("/{recommendation_id}", response_model=RecommendationRead)
async def get_recommendation(
    recommendation_id: int,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationRead:
    try:
        return await service.get_by_id(recommendation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/{recommendation_id}/upvote", response_model=RecommendationRead)
async def upvote_recommendation(
    recommendation_id: int,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationRead:
    try:
        return await service.upvote(recommendation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/{recommendation_id}/downvote", response_model=Optional[RecommendationRead])
async def downvote_recommendation(
    recommendation_id: int,
    service: RecommendationService = Depends(get_recommendation_service),
) -> Optional[RecommendationRead]:
    """Subtract one vote.

    The body is ``null`` when the vote removed the recommendation.
    """
    try:
        return await service.downvote(recommendation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/{recommendation_id}/upvote", include_in_schema=False)
@router.get("/{recommendation_id}/downvote", include_in_schema=False)
async def vote_with_get(recommendation_id: str) -> None:
    """Votes are POST only; a GET on a vote path is an unknown resource."""
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
