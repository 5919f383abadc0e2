"""Career assessment pipeline.

Public API:
    - AssessmentService: Traits -> archetype -> ranked roles -> clusters -> gaps
    - AssessmentReport: Result model
"""

from src.assessment.models import AssessmentReport
from src.assessment.service import AssessmentService, roll_up_gaps

__all__ = ["AssessmentService", "AssessmentReport", "roll_up_gaps"]
