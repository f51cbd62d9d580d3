"""Core Layer — pure query/slug/pagination logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure; slugify's fallback path is the only non-deterministic one

Design Decisions:
    - Functional core separated from imperative shell: the async slug resolver
      lives in services/ and reaches storage through repository_protocols
"""
