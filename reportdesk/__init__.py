"""reportdesk — report management service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
