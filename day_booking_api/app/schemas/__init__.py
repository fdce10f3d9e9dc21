"""
Pydantic schema definitions for API payloads.

Each domain (bookings, notes) defines its own request and response
models.  Schemas are separated from the SQL in the services so the API
representation can change independently of the table layout.
"""
