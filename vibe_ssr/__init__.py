"""Vibe SSR Application Package — mock data served as pages and JSON endpoints.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
