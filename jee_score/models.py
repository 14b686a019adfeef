from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

NO_ANSWER = "No Answer"
DROP = "Drop"


class Subject(str, Enum):
    PHYSICS = "physics"
    CHEMISTRY = "chemistry"
    MATHS = "maths"
    UNKNOWN = "unknown"


class QuestionType(str, Enum):
    MCQ = "MCQ"
    SA = "SA"
    UNKNOWN = "unknown"


class GeneralInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    application_number: str = ""
    candidate_name: str = ""
    roll_number: str = ""
    test_date: str = ""  # DD/MM/YYYY, as printed on the sheet
    test_time: str = ""


class QuestionResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    question_id: str
    given_answer: str = NO_ANSWER
    subject: Subject = Subject.UNKNOWN
    question_type: QuestionType = QuestionType.UNKNOWN

    @property
    def answered(self) -> bool:
        return bool(self.given_answer) and self.given_answer != NO_ANSWER


class ParsedSheet(BaseModel):
    model_config = ConfigDict(frozen=True)

    general_info: GeneralInfo
    questions: Tuple[QuestionResponse, ...] = ()

    def question_ids(self) -> List[str]:
        return [q.question_id for q in self.questions]

    def find(self, question_id: str) -> Optional[QuestionResponse]:
        for q in self.questions:
            if q.question_id == question_id:
                return q
        return None


class MarkingScheme(BaseModel):
    """Marks awarded per outcome. Unattempted questions always score zero."""

    model_config = ConfigDict(frozen=True)

    correct: int = 4
    incorrect: int = -1
    dropped: int = 4


class SubjectStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    correct: int = 0
    incorrect: int = 0
    unattempted: int = 0
    dropped: int = 0


class ScoreReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    correct_count: int
    incorrect_count: int
    dropped_count: int
    attempted_count: int
    total_questions: int
    total_score: int
    subject_stats: Dict[str, SubjectStats]
    marking: MarkingScheme = MarkingScheme()

    @property
    def unattempted_count(self) -> int:
        return self.total_questions - self.attempted_count - self.dropped_count

    @property
    def max_score(self) -> int:
        return self.total_questions * self.marking.correct
