"""Infrastructure — database sessions, the procedure store and logging setup.

Invariants:
    - The only layer that talks to the database driver
"""
