"""API views - thin pydantic layer over services."""
