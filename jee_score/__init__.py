from .answer_keys import AnswerKeyStore
from .errors import (
    AnswerKeyLoadError,
    FetchError,
    KeyNotFoundError,
    MalformedDateError,
    ParseError,
    ScoreError,
    UnknownShiftError,
)
from .models import (
    DROP,
    NO_ANSWER,
    GeneralInfo,
    MarkingScheme,
    ParsedSheet,
    QuestionResponse,
    QuestionType,
    ScoreReport,
    Subject,
    SubjectStats,
)
from .parser import parse_response_sheet
from .pipeline import ScoredSheet, score_document
from .report import format_report
from .resolver import ShiftRules, lookup_answer_key, resolve_exam_id
from .scoring import evaluate

__all__ = [
    "AnswerKeyStore",
    "AnswerKeyLoadError",
    "FetchError",
    "KeyNotFoundError",
    "MalformedDateError",
    "ParseError",
    "ScoreError",
    "UnknownShiftError",
    "DROP",
    "NO_ANSWER",
    "GeneralInfo",
    "MarkingScheme",
    "ParsedSheet",
    "QuestionResponse",
    "QuestionType",
    "ScoreReport",
    "Subject",
    "SubjectStats",
    "parse_response_sheet",
    "ScoredSheet",
    "score_document",
    "format_report",
    "ShiftRules",
    "lookup_answer_key",
    "resolve_exam_id",
    "evaluate",
]
