# Area: Intake
"""
Intake - Player registration and master card set construction.

This package handles:
- Name validation and team sequencing
- Candidate offering and rerolls
- Pick / manual title validation and de-duplication
"""

from .roster import RosterBuilder

__all__ = ["RosterBuilder"]
