"""Document Models: Pydantic models for documents stored in MongoDB."""
