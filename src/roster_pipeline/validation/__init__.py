"""
Validation Package - Boundary Checks for View States.

Components:
    - ViewStateValidator: Fail-fast validation of requested view states
"""

from roster_pipeline.validation.view_state_validator import ViewStateValidator

__all__ = ["ViewStateValidator"]
