"""Services: one coroutine per store statement, called by the routes.

Invariants:
    - Each operation issues exactly one SQL statement (plus commit for writes)
    - Store failures surface as StorageError via infrastructure.database.storage_errors
"""
