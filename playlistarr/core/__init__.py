"""Core domain types."""
