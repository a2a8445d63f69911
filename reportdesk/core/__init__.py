"""Core Layer — error codes, collaborator contracts and pure validation.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validation functions are pure and deterministic
"""
