"""API Layer: FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Store access only through the UserRepository dependency
"""
