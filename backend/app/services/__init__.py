"""Services Layer — thin pass-throughs from validated input to named procedures.

Invariants:
    - One module per resource; functions take the ProcedureStore explicitly
    - No business rules here: the procedures own them
"""
