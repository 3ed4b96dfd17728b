"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
    - Visibility is always computed from an explicit Actor argument, never from ambient state

Design Decisions:
    - Functional core separated from imperative shell: services fetch, core decides, services write
"""
