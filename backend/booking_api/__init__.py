"""Hotel Booking API Package: single-room booking per authenticated user.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
