"""
SQL access for the ``recommendations`` table.

``RecommendationRepository`` wraps a single connection handed to it by
the caller (usually the ``get_db`` dependency).  Methods that change
data do not commit on their own unless noted; the service groups them
inside ``transaction()`` so that related statements succeed or fail
together.

All queries use parameterized statements.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional

# Largest value SQLite can bind as an INTEGER.  No row can have an id
# above it, and larger LIMIT values mean "every row".
SQLITE_MAX_INTEGER = 2**63 - 1


def _is_storable(value: int) -> bool:
    return -SQLITE_MAX_INTEGER - 1 <= value <= SQLITE_MAX_INTEGER


class RecommendationRepository:
    """Storage operations for recommendations."""

    _COLUMNS = "id, name, youtube_link, score"

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Run the enclosed statements in one transaction.

        Commits on normal exit and rolls back if the block raises.
        """
        with self.conn:
            yield self.conn.cursor()

    def create(self, name: str, youtube_link: str) -> sqlite3.Row:
        """Insert a recommendation with a score of 0 and return the new row.

        Raises ``sqlite3.IntegrityError`` if the name is already taken.
        """
        with self.transaction() as cursor:
            cursor.execute(
                "INSERT INTO recommendations (name, youtube_link, score) VALUES (?, ?, 0)",
                (name, youtube_link),
            )
            recommendation_id = cursor.lastrowid
        return self.find_by_id(recommendation_id)

    def find_by_id(self, recommendation_id: int) -> Optional[sqlite3.Row]:
        if not _is_storable(recommendation_id):
            return None
        return self.conn.execute(
            f"SELECT {self._COLUMNS} FROM recommendations WHERE id = ?",
            (recommendation_id,),
        ).fetchone()

    def find_by_name(self, name: str) -> Optional[sqlite3.Row]:
        return self.conn.execute(
            f"SELECT {self._COLUMNS} FROM recommendations WHERE name = ?",
            (name,),
        ).fetchone()

    def find_recent(self, limit: int) -> List[sqlite3.Row]:
        """Return up to ``limit`` rows, newest first."""
        return self.conn.execute(
            f"SELECT {self._COLUMNS} FROM recommendations ORDER BY id DESC LIMIT ?",
            (min(limit, SQLITE_MAX_INTEGER),),
        ).fetchall()

    def find_top(self, amount: int) -> List[sqlite3.Row]:
        """Return up to ``amount`` rows with the highest scores."""
        return self.conn.execute(
            f"SELECT {self._COLUMNS} FROM recommendations ORDER BY score DESC, id ASC LIMIT ?",
            (min(amount, SQLITE_MAX_INTEGER),),
        ).fetchall()

    def find_by_score(
        self,
        above: Optional[int] = None,
        at_most: Optional[int] = None,
    ) -> List[sqlite3.Row]:
        """Return rows with ``score > above`` and ``score <= at_most``.

        Either bound may be omitted; with neither, every row is returned.
        """
        query = f"SELECT {self._COLUMNS} FROM recommendations"
        params: list = []
        where_clauses: list[str] = []
        if above is not None:
            where_clauses.append("score > ?")
            params.append(above)
        if at_most is not None:
            where_clauses.append("score <= ?")
            params.append(at_most)
        if where_clauses:
            query += " WHERE " + " AND ".join(where_clauses)
        query += " ORDER BY id ASC"
        return self.conn.execute(query, tuple(params)).fetchall()

    def add_to_score(self, cursor: sqlite3.Cursor, recommendation_id: int, delta: int) -> bool:
        """Shift the score by ``delta`` in place.  Returns ``False`` if no row matched."""
        if not _is_storable(recommendation_id):
            return False
        cursor.execute(
            "UPDATE recommendations SET score = score + ? WHERE id = ?",
            (delta, recommendation_id),
        )
        return cursor.rowcount > 0

    def delete_if_below(self, cursor: sqlite3.Cursor, recommendation_id: int, floor: int) -> bool:
        """Delete the row if its score is strictly below ``floor``."""
        cursor.execute(
            "DELETE FROM recommendations WHERE id = ? AND score < ?",
            (recommendation_id, floor),
        )
        return cursor.rowcount > 0

    # ------------------------------------------------------------------
    # Administrative operations
    #
    # Not reachable through the public API or the service: votes are the
    # only way clients change a score.  These exist for operators working
    # on the table directly and for test fixtures that need a row at a
    # given score or a row that has disappeared.
    # ------------------------------------------------------------------
    def update_score(self, recommendation_id: int, score: int) -> bool:
        """Overwrite the score of a row and commit."""
        with self.transaction() as cursor:
            cursor.execute(
                "UPDATE recommendations SET score = ? WHERE id = ?",
                (score, recommendation_id),
            )
            return cursor.rowcount > 0

    def delete(self, recommendation_id: int) -> bool:
        """Delete a row by id and commit."""
        with self.transaction() as cursor:
            cursor.execute("DELETE FROM recommendations WHERE id = ?", (recommendation_id,))
            return cursor.rowcount > 0

    def truncate(self) -> int:
        """Delete every row and commit.  Returns the number of rows removed.

        The AUTOINCREMENT counter is left untouched so ids stay unique.
        """
        with self.transaction() as cursor:
            cursor.execute("DELETE FROM recommendations")
            return cursor.rowcount
