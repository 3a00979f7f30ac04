"""
Top‑level package for the Recommendation API.

This file makes ``recommendation_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``recommendation_api.app.main``.  The HTTP client for the API
lives in ``recommendation_api.client``.

The package provides no public exports; all functionality lives in
submodules.
"""

__all__ = []
