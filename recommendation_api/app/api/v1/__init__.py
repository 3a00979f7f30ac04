"""
Version 1 of the API.

This subpackage bundles the recommendation endpoints.  Breaking
changes should be introduced in a new version subpackage.
"""
