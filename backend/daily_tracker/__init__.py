"""Daily Tracker Package: HTTP adapter over the tasks and water intake tables.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
