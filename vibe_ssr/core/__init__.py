"""Core Layer — pure domain logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Clock, RNG and timezone arrive as arguments, never read globally

Design Decisions:
    - Functional core separated from imperative shell: routes stay thin and untested
      branches stay out of them
"""
