"""Infrastructure Layer: MongoDB client, repository, static files, logging.

Invariants:
    - Driver exceptions never cross this layer unmapped (PyMongoError → DatabaseError)
"""
