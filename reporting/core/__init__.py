"""Core Layer — pure reporting logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic: same rows in, same rows out

Design Decisions:
    - Functional core separated from imperative shell: services fetch rows,
      core folds them into report rows
"""
