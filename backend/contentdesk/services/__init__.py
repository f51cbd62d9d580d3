"""Services Layer — resource facades composing the core engine with storage.

Invariants:
    - Services own transactions (commit/rollback); routes never touch the session directly
    - Services raise ContentDeskError subclasses, never HTTPException
"""
