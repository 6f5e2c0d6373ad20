"""TaskTree Application Package — task and category management API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
