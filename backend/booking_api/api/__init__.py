"""API Layer: FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses
    - HTTP status codes are chosen here and nowhere else

Design Decisions:
    - Thin routes delegate to services
"""
