"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Wire names are camelCase (roomId, bookingId, hotelId); Python names stay snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
