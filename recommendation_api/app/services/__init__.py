"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to
storage only through an injected repository, so API handlers never
contain SQL.
"""
