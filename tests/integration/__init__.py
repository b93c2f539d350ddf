"""Integration tests package.

Repository tests against a REAL PostgreSQL database. Each test gets a fresh
Database instance and a schema whose tables are emptied beforehand.

Note:
    Tests are skipped when DATABASE_URL points at a server that is not
    reachable.
"""
