"""Core domain types for submission statistics."""
