"""Core Layer: domain types, error hierarchy, error policy and boundary protocols.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - No IO in core/: the policy and parsers are pure functions
"""
