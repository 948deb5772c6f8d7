"""
Pydantic schema definitions for API payloads.

Each entity kind defines its own Pydantic models: a ``*Read`` model
that is also the record type kept in the store, a ``*Create`` model
for insert payloads and a ``*Update`` model for partial updates.
All models serialise with camelCase field names, the format the
dashboard front end speaks.
"""
