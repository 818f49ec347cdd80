"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (DELETE returns an empty body)
    - HTTP status codes are chosen here and nowhere else
"""
