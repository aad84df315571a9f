"""Check-in submission service."""
