"""Constructors for fresh and copied Question records."""
from __future__ import annotations

from dataclasses import replace

from quiz_kit.models import Question


def make_blank_question(id: int, name: str, type: str) -> Question:
    return Question(
        id=id,
        name=name,
        type=type,
        body="",
        expected="",
        options=(),
        points=0,
        published=False,
    )


def duplicate_question(new_id: int, question: Question) -> Question:
    """Structural copy of ``question`` with only the id replaced."""
    return replace(question, id=new_id)
