"""Users Service Package: CRUD over a MongoDB "users" collection plus static pages.

Invariants:
    - Package root holds only the version string (import side-effects prohibited)
"""

__version__ = "1.0.0"
