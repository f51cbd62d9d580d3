"""Route Modules — one file per resource collection.

Invariants:
    - Each module defines its own APIRouter with a resource prefix and tags
    - Routes never contain business logic (delegate to services)
    - Fixed paths are registered before the generic /{id_or_slug} route

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
