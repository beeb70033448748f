"""
Pydantic schema definitions for records and payloads.

Each entity defines a payload model (fields supplied by clients) and a
record model that adds the store-managed ``id`` and timestamps.
"""
