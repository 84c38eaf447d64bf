"""Infrastructure Layer: store access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All store exceptions leave this layer as StorageError
"""
