"""Todo API Package — CRUD REST service for Todo records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Version lives here so the app factory and health check report the same value
"""

__version__ = "1.0.0"
