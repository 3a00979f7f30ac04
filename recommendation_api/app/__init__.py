"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Request payloads live in ``schemas``, SQL access in
``repositories``, business rules in ``services`` and HTTP routes in
``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
