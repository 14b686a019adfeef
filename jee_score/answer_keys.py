"""Published answer keys, one per exam sitting.

Keys are stored as ``{exam_id: {question_id: answer}}`` where ``answer`` is a
single correct token, a comma separated list of accepted tokens, or ``Drop``.
"""
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, List, Mapping, Union

from .errors import AnswerKeyLoadError, KeyNotFoundError

logger = logging.getLogger(__name__)

AnswerKey = Mapping[str, str]


def _normalize_answer(value) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(str(v).strip() for v in value)
    return str(value).strip()


class AnswerKeyStore:
    """Read-only registry built once at startup and shared by every request."""

    def __init__(self, keys: Mapping[str, Mapping[str, object]]):
        frozen = {}
        for exam_id, answers in keys.items():
            if not isinstance(answers, Mapping):
                raise AnswerKeyLoadError(f"Answer key for {exam_id} must be a mapping of question id to answer")
            frozen[str(exam_id)] = MappingProxyType(
                {str(qid).strip(): _normalize_answer(ans) for qid, ans in answers.items()}
            )
        self._keys = MappingProxyType(frozen)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "AnswerKeyStore":
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise AnswerKeyLoadError(f"Failed to read answer keys from {path}: {e}") from e
        if not isinstance(data, dict):
            raise AnswerKeyLoadError(f"Answer keys file {path} must contain a JSON object")
        store = cls(data)
        logger.info("Loaded %d answer keys from %s", len(store), path)
        return store

    @classmethod
    def empty(cls) -> "AnswerKeyStore":
        return cls({})

    def get(self, exam_id: str) -> AnswerKey:
        try:
            return self._keys[exam_id]
        except KeyError:
            raise KeyNotFoundError(exam_id) from None

    def exam_ids(self) -> List[str]:
        return sorted(self._keys)

    def __contains__(self, exam_id) -> bool:
        return exam_id in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)
