"""Application-level API routes."""
