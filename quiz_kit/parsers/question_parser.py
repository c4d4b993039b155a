"""Parse a JSON array of question objects into Question records.

Each object needs ``id``, ``name`` and ``type``; ``body``, ``expected``,
``options``, ``points`` and ``published`` fall back to blank-question values.
Records that cannot be read are skipped rather than failing the whole file.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from quiz_kit.models import Question

_log = logging.getLogger("quiz_kit.parser")

REQUIRED_KEYS = ("id", "name", "type")


def parse_questions_json(text: str, source: str = "<string>") -> list[Question]:
    data = json.loads(text)
    if not isinstance(data, list):
        _log.warning("%s: expected a JSON array, got %s", source, type(data).__name__)
        return []

    questions: list[Question] = []
    for idx, raw in enumerate(data):
        if not isinstance(raw, dict):
            _log.warning("%s: record %d is not an object, skipped", source, idx)
            continue
        missing = [k for k in REQUIRED_KEYS if k not in raw]
        if missing:
            _log.warning("%s: record %d missing %s, skipped", source, idx, ", ".join(missing))
            continue
        try:
            questions.append(Question.from_dict(raw))
        except (TypeError, ValueError) as e:
            _log.warning("%s: record %d invalid (%s), skipped", source, idx, e)
    return questions


def parse_questions_file(path: Path) -> list[Question]:
    return parse_questions_json(path.read_text(encoding="utf-8"), source=path.name)
