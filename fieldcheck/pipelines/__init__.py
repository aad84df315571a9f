"""
Pipeline functions for FieldCheck.

Stateless orchestration between services.
"""

from fieldcheck.pipelines.checkin import submit_checkin_pipeline

__all__ = ["submit_checkin_pipeline"]
