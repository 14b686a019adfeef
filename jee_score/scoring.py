import logging
from typing import Dict, Iterable, Mapping

from .models import DROP, MarkingScheme, QuestionResponse, ScoreReport, Subject, SubjectStats

logger = logging.getLogger(__name__)

DEFAULT_MARKING = MarkingScheme()


def accepted_answers(expected: str) -> set:
    return {token.strip() for token in str(expected).split(",") if token.strip()}


def evaluate(
    questions: Iterable[QuestionResponse],
    answer_key: Mapping[str, str],
    marking: MarkingScheme = DEFAULT_MARKING,
) -> ScoreReport:
    """Score a candidate's responses against an answer key.

    Only questions present in the key are scored. A key entry without a
    matching response counts as unattempted under the ``unknown`` subject,
    and a ``Drop`` entry awards the dropped marks whether or not the
    candidate answered it.
    """
    by_id: Dict[str, QuestionResponse] = {}
    for q in questions:
        by_id.setdefault(q.question_id, q)

    correct = incorrect = dropped = attempted = 0
    subjects: Dict[str, Dict[str, int]] = {}

    for question_id, expected in answer_key.items():
        response = by_id.get(question_id)
        subject = response.subject.value if response is not None else Subject.UNKNOWN.value
        stats = subjects.setdefault(subject, {"correct": 0, "incorrect": 0, "unattempted": 0, "dropped": 0})

        if expected == DROP:
            dropped += 1
            stats["dropped"] += 1
        elif response is not None and response.answered:
            attempted += 1
            if response.given_answer.strip() in accepted_answers(expected):
                correct += 1
                stats["correct"] += 1
            else:
                incorrect += 1
                stats["incorrect"] += 1
        else:
            stats["unattempted"] += 1

    total = correct * marking.correct + incorrect * marking.incorrect + dropped * marking.dropped
    logger.debug(
        "Scored %d questions: %d correct, %d incorrect, %d dropped, score %d",
        len(answer_key), correct, incorrect, dropped, total,
    )
    return ScoreReport(
        correct_count=correct,
        incorrect_count=incorrect,
        dropped_count=dropped,
        attempted_count=attempted,
        total_questions=len(answer_key),
        total_score=total,
        subject_stats={name: SubjectStats(**subjects[name]) for name in sorted(subjects)},
        marking=marking,
    )
