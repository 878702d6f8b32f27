"""
Pydantic schema definitions for API payloads.

Schemas describe both the JSON exchanged over HTTP and the documents
persisted in MongoDB; the two share the same external field names.
"""
