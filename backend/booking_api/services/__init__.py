"""Services Layer: imperative shell around the booking rules.

Invariants:
    - Services receive repositories by injection; they never open DB sessions
"""
