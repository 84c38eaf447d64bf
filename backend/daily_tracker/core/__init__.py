"""Core Layer: pure request checks and wire formatting, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
"""
