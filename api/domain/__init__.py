"""Domain entities and request/response schemas for todos."""
