"""Location acquisition service."""
