"""Infrastructure Layer: database access, token verification, and logging.

Invariants:
    - Infrastructure implements core/ protocols; core never imports from here
    - All SQLAlchemy failures mapped to DatabaseError
"""
