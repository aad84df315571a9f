"""Login service."""
