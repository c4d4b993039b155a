"""Pure transformations over an ordered sequence of Question records.

Nothing here mutates its input or raises for a missing id. Lookups that miss
return None; edits that miss return an unchanged copy of the sequence.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from quiz_kit.models import Answer, Question, QuestionType
from quiz_kit.objects import duplicate_question, make_blank_question

_log = logging.getLogger("quiz_kit.questions")

CSV_HEADER = "id,name,options,points,published"


def filter_published(questions: Sequence[Question]) -> list[Question]:
    return [q for q in questions if q.published]


def filter_non_empty(questions: Sequence[Question]) -> list[Question]:
    """Drop questions whose body, expected answer and options are all empty.

    A question with any one of the three filled in is kept.
    """
    return [q for q in questions if not q.is_empty()]


def find_by_id(questions: Sequence[Question], id: int) -> Question | None:
    return next((q for q in questions if q.id == id), None)


def remove_by_id(questions: Sequence[Question], id: int) -> list[Question]:
    # Removes every match, not just the first
    return [q for q in questions if q.id != id]


def names_of(questions: Sequence[Question]) -> list[str]:
    return [q.name for q in questions]


def total_points(questions: Sequence[Question]) -> int:
    return sum(q.points for q in questions)


def total_published_points(questions: Sequence[Question]) -> int:
    return sum(q.points for q in questions if q.published)


def _csv_row(q: Question) -> str:
    published = "true" if q.published else "false"
    return f"{q.id},{q.name},{len(q.options)},{q.points},{published}"


def to_csv(questions: Sequence[Question]) -> str:
    """Render questions as CSV text.

    The options column holds the number of options, not their text. Fields are
    not quoted, so names containing commas produce ambiguous rows. There is no
    trailing newline; an empty sequence yields the header alone.
    """
    return "\n".join([CSV_HEADER, *(_csv_row(q) for q in questions)])


def to_answers(questions: Sequence[Question]) -> list[Answer]:
    return [Answer(question_id=q.id) for q in questions]


def publish_all(questions: Sequence[Question]) -> list[Question]:
    return [replace(q, published=True) for q in questions]


def all_same_type(questions: Sequence[Question]) -> bool:
    """True when every question shares the first one's type.

    An empty sequence is vacuously uniform.
    """
    if not questions:
        return True
    first = questions[0].type
    return all(q.type == first for q in questions)


def append_blank(
    questions: Sequence[Question],
    id: int,
    name: str,
    type: str,
) -> list[Question]:
    return [*questions, make_blank_question(id, name, type)]


def rename_by_id(
    questions: Sequence[Question],
    target_id: int,
    new_name: str,
) -> list[Question]:
    return [replace(q, name=new_name) if q.id == target_id else q for q in questions]


def _retyped(q: Question, new_type: str) -> Question:
    if new_type != QuestionType.MULTIPLE_CHOICE:
        return replace(q, type=new_type, options=())
    return replace(q, type=new_type)


def change_type_by_id(
    questions: Sequence[Question],
    target_id: int,
    new_type: str,
) -> list[Question]:
    """Change the type of the targeted question.

    Switching to anything other than multiple choice also clears its options.
    """
    return [_retyped(q, new_type) if q.id == target_id else q for q in questions]


def _with_option(q: Question, option_index: int, new_option: str) -> Question:
    if option_index == -1:
        return replace(q, options=(*q.options, new_option))
    if not 0 <= option_index < len(q.options):
        _log.warning(
            "Option index %d out of range for question %d (%d options); left unchanged",
            option_index, q.id, len(q.options),
        )
        return q
    options = list(q.options)
    options[option_index] = new_option
    return replace(q, options=tuple(options))


def edit_option(
    questions: Sequence[Question],
    target_id: int,
    option_index: int,
    new_option: str,
) -> list[Question]:
    """Append (index -1) or replace one option of the targeted question."""
    return [
        _with_option(q, option_index, new_option) if q.id == target_id else q
        for q in questions
    ]


def duplicate_in_sequence(
    questions: Sequence[Question],
    target_id: int,
    new_id: int,
) -> list[Question]:
    """Insert a copy of the targeted question, with id ``new_id``, right after it.

    Only the first question with ``target_id`` is duplicated. When no question
    matches, the sequence comes back unchanged.
    """
    result = list(questions)
    for i, q in enumerate(result):
        if q.id == target_id:
            result.insert(i + 1, duplicate_question(new_id, q))
            return result
    _log.warning("Cannot duplicate question %d: not found", target_id)
    return result
