"""
Business logic for recommendations.

The ``RecommendationService`` enforces the rules of the voting game:
names are unique among existing entries, every vote moves the score by
exactly one, and a downvote that takes the score strictly below the
floor (``-5`` by default) removes the entry in the same transaction.

Storage is reached through an injected ``RecommendationRepository``.
Score changes are applied with ``score = score ± 1`` in SQL rather
than read‑modify‑write, and the downvote decrement and conditional
delete commit together, so concurrent votes cannot lose updates or
leave a row below the floor.
"""

from __future__ import annotations

import logging
import random
import sqlite3
from typing import List, Optional

from ..core.config import settings
from ..core.errors import ConflictError, NotFoundError
from ..repositories.recommendation_repository import RecommendationRepository
from ..schemas.recommendation import RecommendationCreate, RecommendationRead

logger = logging.getLogger(__name__)


class RecommendationService:
    """Service for creating, voting on and selecting recommendations."""

    def __init__(
        self,
        repository: RecommendationRepository,
        rng: Optional[random.Random] = None,
        score_floor: Optional[int] = None,
        popular_score_threshold: Optional[int] = None,
        random_popular_ratio: Optional[float] = None,
    ) -> None:
        self.repository = repository
        self.rng = rng or random.Random()
        self.score_floor = settings.score_floor if score_floor is None else score_floor
        self.popular_score_threshold = (
            settings.popular_score_threshold if popular_score_threshold is None else popular_score_threshold
        )
        self.random_popular_ratio = (
            settings.random_popular_ratio if random_popular_ratio is None else random_popular_ratio
        )

    async def create(self, data: RecommendationCreate) -> RecommendationRead:
        """Insert a new recommendation with a score of 0.

        Raises ``ConflictError`` if a recommendation with the same name
        already exists.  The unique index on ``name`` backs this check
        when two requests race.
        """
        if self.repository.find_by_name(data.name) is not None:
            logger.warning("Rejected duplicate recommendation name '%s'", data.name)
            raise ConflictError("Recommendations names must be unique")
        try:
            row = self.repository.create(data.name, data.youtube_link)
        except sqlite3.IntegrityError as e:
            logger.warning("Rejected duplicate recommendation name '%s'", data.name)
            raise ConflictError("Recommendations names must be unique") from e
        logger.info("Created recommendation %s '%s'", row["id"], data.name)
        return self._row_to_read(row)

    async def upvote(self, recommendation_id: int) -> RecommendationRead:
        """Add one to the score and return the updated recommendation."""
        with self.repository.transaction() as cursor:
            if not self.repository.add_to_score(cursor, recommendation_id, 1):
                raise self._not_found(recommendation_id)
        logger.info("Upvoted recommendation %s", recommendation_id)
        return await self.get_by_id(recommendation_id)

    async def downvote(self, recommendation_id: int) -> Optional[RecommendationRead]:
        """Subtract one from the score.

        If the new score is strictly below the floor the recommendation
        is deleted instead and ``None`` is returned.  The decrement and
        the delete commit as one unit, so the decremented value of a
        removed row is never stored.
        """
        with self.repository.transaction() as cursor:
            if not self.repository.add_to_score(cursor, recommendation_id, -1):
                raise self._not_found(recommendation_id)
            removed = self.repository.delete_if_below(cursor, recommendation_id, self.score_floor)
        if removed:
            logger.info(
                "Removed recommendation %s after its score fell below %s",
                recommendation_id,
                self.score_floor,
            )
            return None
        logger.info("Downvoted recommendation %s", recommendation_id)
        return await self.get_by_id(recommendation_id)

    async def get_by_id(self, recommendation_id: int) -> RecommendationRead:
        row = self.repository.find_by_id(recommendation_id)
        if row is None:
            raise self._not_found(recommendation_id)
        return self._row_to_read(row)

    async def get_random(self) -> RecommendationRead:
        """Pick one recommendation at random.

        Most of the time (``random_popular_ratio``) the pick is made
        among entries scoring above ``popular_score_threshold``; the
        rest of the time among the others.  If the chosen group is
        empty every entry is eligible.  Raises ``NotFoundError`` when
        there are no recommendations at all.
        """
        if self.rng.random() < self.random_popular_ratio:
            rows = self.repository.find_by_score(above=self.popular_score_threshold)
        else:
            rows = self.repository.find_by_score(at_most=self.popular_score_threshold)
        if not rows:
            rows = self.repository.find_by_score()
        if not rows:
            raise NotFoundError("No recommendations available")
        return self._row_to_read(self.rng.choice(rows))

    async def get_top(self, amount: int) -> List[RecommendationRead]:
        """Return up to ``amount`` recommendations, highest score first."""
        return [self._row_to_read(row) for row in self.repository.find_top(amount)]

    async def list_recent(self, limit: Optional[int] = None) -> List[RecommendationRead]:
        """Return the most recently created recommendations, newest first."""
        limit = settings.list_limit if limit is None else limit
        return [self._row_to_read(row) for row in self.repository.find_recent(limit)]

    async def reset(self) -> int:
        """Remove every recommendation.  Used by end‑to‑end suites only."""
        removed = self.repository.truncate()
        logger.warning("Removed all %s recommendations", removed)
        return removed

    @staticmethod
    def _not_found(recommendation_id: int) -> NotFoundError:
        logger.warning("Recommendation %s not found", recommendation_id)
        return NotFoundError(f"Recommendation {recommendation_id} not found")

    @staticmethod
    def _row_to_read(row: sqlite3.Row) -> RecommendationRead:
        """Convert a database row to a RecommendationRead schema instance."""
        return RecommendationRead(
            id=row["id"],
            name=row["name"],
            youtube_link=row["youtube_link"],
            score=row["score"],
        )
