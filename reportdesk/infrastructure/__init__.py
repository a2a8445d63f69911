"""Infrastructure Layer — database sessions, repositories, message broker, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver errors are mapped to ReportDeskError subclasses (core/errors.py)
"""
