"""Shared test fixtures."""
from __future__ import annotations

import pytest

from quiz_kit.models import Question, QuestionType


@pytest.fixture
def blank_question():
    """A question with no body, expected answer or options."""
    return Question(id=7, name="Blank", type=QuestionType.SHORT_ANSWER)


@pytest.fixture
def sample_questions():
    """Four questions mixing types, points and published status."""
    return [
        Question(
            id=1,
            name="Addition",
            type=QuestionType.SHORT_ANSWER,
            body="What is 2+2?",
            expected="4",
            points=1,
            published=True,
        ),
        Question(
            id=2,
            name="Letters",
            type=QuestionType.SHORT_ANSWER,
            body="What is the last letter of the English alphabet?",
            expected="Z",
            points=1,
            published=False,
        ),
        Question(
            id=5,
            name="Colors",
            type=QuestionType.MULTIPLE_CHOICE,
            body="Which of these is a color?",
            expected="red",
            options=("red", "apple", "firetruck"),
            points=1,
            published=True,
        ),
        Question(
            id=9,
            name="Shapes",
            type=QuestionType.MULTIPLE_CHOICE,
            body="What shape can you make with one line?",
            expected="circle",
            options=("square", "triangle", "circle"),
            points=2,
            published=False,
        ),
    ]


@pytest.fixture
def sample_questions_json():
    """JSON text equivalent to the bundled sample file, plus one bad record."""
    return """\
[
    {"id": 1, "name": "Addition", "type": "short_answer_question",
     "body": "What is 2+2?", "expected": "4", "options": [], "points": 1, "published": true},
    {"id": 5, "name": "Colors", "type": "multiple_choice_question",
     "body": "Which of these is a color?", "expected": "red",
     "options": ["red", "apple", "firetruck"], "points": 1, "published": true},
    {"name": "No id", "type": "short_answer_question"},
    "not a record",
    {"id": 12, "name": "Bare", "type": "short_answer_question"}
]
"""
