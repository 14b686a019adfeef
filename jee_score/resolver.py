"""Map a candidate's exam date and shift onto a published answer key."""
import datetime
import logging
import re
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .answer_keys import AnswerKey, AnswerKeyStore
from .errors import MalformedDateError, UnknownShiftError
from .models import GeneralInfo

logger = logging.getLogger(__name__)

TEST_DATE = re.compile(r"(\d{1,2})/(\d{1,2})/([1-9]\d{3})", re.ASCII)


class ShiftRules(BaseModel):
    """Ordered shift markers matched against the sheet's test time.

    The first rule with a marker contained in the time text wins. When no
    rule matches, ``fallback`` is used; without a fallback the shift is
    reported as unknown.
    """

    model_config = ConfigDict(frozen=True)

    rules: Tuple[Tuple[str, Tuple[str, ...]], ...] = (("shift-1", ("9:00",)),)
    fallback: Optional[str] = "shift-2"

    @classmethod
    def parse(cls, text: str, fallback: Optional[str] = "shift-2") -> "ShiftRules":
        """Build rules from ``"shift-1=9:00;shift-2=3:00,2:30"``."""
        rules = []
        for chunk in text.split(";"):
            if not chunk.strip():
                continue
            label, sep, markers = chunk.partition("=")
            if not sep or not label.strip():
                raise ValueError(f"Invalid shift rule: {chunk!r}")
            values = tuple(m.strip() for m in markers.split(",") if m.strip())
            if not values:
                raise ValueError(f"Shift rule {label.strip()!r} has no markers")
            rules.append((label.strip(), values))
        return cls(rules=tuple(rules), fallback=fallback or None)

    def shift_for(self, test_time: str) -> str:
        for label, markers in self.rules:
            if any(marker in test_time for marker in markers):
                return label
        if self.fallback is None:
            raise UnknownShiftError(f"No shift matches test time {test_time!r}")
        return self.fallback


DEFAULT_SHIFT_RULES = ShiftRules()


def parse_test_date(text: str) -> datetime.date:
    match = TEST_DATE.fullmatch(text.strip())
    if match is None:
        raise MalformedDateError(f"Expected DD/MM/YYYY, got {text!r}")
    day, month, year = (int(g) for g in match.groups())
    try:
        return datetime.date(year, month, day)
    except ValueError as e:
        raise MalformedDateError(f"Invalid test date {text!r}: {e}") from e


def resolve_exam_id(info: GeneralInfo, rules: ShiftRules = DEFAULT_SHIFT_RULES) -> str:
    date = parse_test_date(info.test_date)
    shift = rules.shift_for(info.test_time)
    exam_id = f"{date.year:04d}-{date.month:02d}-{date.day:02d}-{shift}"
    logger.debug("Resolved %r / %r to %s", info.test_date, info.test_time, exam_id)
    return exam_id


def lookup_answer_key(
    info: GeneralInfo,
    store: AnswerKeyStore,
    rules: ShiftRules = DEFAULT_SHIFT_RULES,
) -> Tuple[str, AnswerKey]:
    exam_id = resolve_exam_id(info, rules)
    return exam_id, store.get(exam_id)
