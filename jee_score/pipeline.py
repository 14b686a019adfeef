from typing import Union

from pydantic import BaseModel, ConfigDict

from .answer_keys import AnswerKeyStore
from .models import MarkingScheme, ParsedSheet, ScoreReport
from .parser import parse_response_sheet
from .resolver import DEFAULT_SHIFT_RULES, ShiftRules, lookup_answer_key
from .scoring import DEFAULT_MARKING, evaluate


class ScoredSheet(BaseModel):
    model_config = ConfigDict(frozen=True)

    sheet: ParsedSheet
    exam_id: str
    report: ScoreReport


def score_document(
    document: Union[str, bytes],
    store: AnswerKeyStore,
    rules: ShiftRules = DEFAULT_SHIFT_RULES,
    marking: MarkingScheme = DEFAULT_MARKING,
) -> ScoredSheet:
    sheet = parse_response_sheet(document)
    exam_id, answer_key = lookup_answer_key(sheet.general_info, store, rules)
    report = evaluate(sheet.questions, answer_key, marking)
    return ScoredSheet(sheet=sheet, exam_id=exam_id, report=report)
