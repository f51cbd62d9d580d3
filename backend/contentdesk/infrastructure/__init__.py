"""Infrastructure Layer — database access, SQL query compilation, logging setup.

Invariants:
    - Infrastructure may import core/ types (specs, errors) but never services/ or api/
    - All SQLAlchemy errors mapped to ContentDeskError subclasses before reaching routes
"""
