"""
Pydantic schema definitions for API payloads.

Schemas define the JSON contract of the API and double as the record
type held by the store.
"""
