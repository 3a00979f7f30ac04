"""Recommendation API client.

This module defines a small client wrapper around the REST surface of
the recommendation service.  It uses the ``requests`` library
internally and exposes one method per endpoint:

* :meth:`RecommendationAPI.create` – submit a new recommendation.
* :meth:`RecommendationAPI.upvote` / :meth:`RecommendationAPI.downvote` – vote.
* :meth:`RecommendationAPI.get` – fetch a single recommendation by id.
* :meth:`RecommendationAPI.random` – fetch a random recommendation.
* :meth:`RecommendationAPI.top` – fetch the best scored recommendations.
* :meth:`RecommendationAPI.list` – fetch the most recent recommendations.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list) and
``error`` is a dictionary with ``status_code`` and ``message`` keys.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RecommendationAPI:
    """Client for interacting with the recommendation API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/recommendations``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") if isinstance(err_json, dict) else None
                    if not isinstance(message, str):
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _request_list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    # ------------------------------------------------------------------
    # Recommendation operations
    # ------------------------------------------------------------------
    def create(self, name: str, youtube_link: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Submit a new recommendation."""
        return self._request(
            "POST",
            "/recommendations",
            json_body={"name": name, "youtubeLink": youtube_link},
        )

    def upvote(self, recommendation_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"/recommendations/{recommendation_id}/upvote")

    def downvote(self, recommendation_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Downvote a recommendation.

        ``data`` is ``None`` without an error when the vote removed it.
        """
        return self._request("POST", f"/recommendations/{recommendation_id}/downvote")

    def get(self, recommendation_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/recommendations/{recommendation_id}")

    def random(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/recommendations/random")

    def top(self, amount: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._request_list(f"/recommendations/top/{amount}")

    def list(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._request_list("/recommendations")
