from app.models.user import User
from app.models.assessment import Assessment
from app.models.question import Question, Option
from app.models.response import Response
from app.models.assessment_file import AssessmentFile

__all__ = [
    "User",
    "Assessment",
    "Question",
    "Option",
    "Response",
    "AssessmentFile",
]
