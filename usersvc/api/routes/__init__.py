"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Error translation happens in the handler that owns the operation
"""
