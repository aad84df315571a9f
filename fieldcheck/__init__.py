"""
FieldCheck

Location-verified daily check-in and check-out client for field workers.
"""

__version__ = "1.0.0"
