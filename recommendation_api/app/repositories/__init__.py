"""
Data access layer.

Repositories hold the SQL for a table and operate on a connection
passed in by the caller, so services never reach for a global
database handle.
"""
