"""Tests for data models and constructors."""
from __future__ import annotations

import dataclasses

import pytest

from quiz_kit.models import Answer, Question, QuestionType
from quiz_kit.objects import duplicate_question, make_blank_question


class TestQuestion:
    def test_defaults(self):
        q = Question(1, "Addition", QuestionType.SHORT_ANSWER)
        assert q.body == ""
        assert q.expected == ""
        assert q.options == ()
        assert q.points == 0
        assert q.published is False

    def test_frozen(self):
        q = Question(1, "Addition", QuestionType.SHORT_ANSWER)
        with pytest.raises(dataclasses.FrozenInstanceError):
            q.name = "Subtraction"

    def test_is_empty(self, blank_question):
        assert blank_question.is_empty()
        assert not dataclasses.replace(blank_question, body="x").is_empty()
        assert not dataclasses.replace(blank_question, expected="x").is_empty()
        assert not dataclasses.replace(blank_question, options=("x",)).is_empty()

    def test_to_dict(self, sample_questions):
        d = sample_questions[2].to_dict()
        assert d["options"] == ["red", "apple", "firetruck"]
        assert d["type"] == "multiple_choice_question"
        assert len(d) == 8

    def test_from_dict_roundtrip(self, sample_questions):
        for q in sample_questions:
            assert Question.from_dict(q.to_dict()) == q

    def test_from_dict_fills_defaults(self):
        q = Question.from_dict({"id": "3", "name": "Bare", "type": "short_answer_question"})
        assert q.id == 3
        assert q.is_empty()
        assert q.published is False

    @pytest.mark.parametrize("field, value", [
        ("published", "false"),
        ("published", 0),
        ("options", "red"),
        ("options", ["red", 3]),
        ("body", 5),
        ("expected", None),
        ("name", 123),
        ("type", ["short_answer_question"]),
        ("points", 1.5),
        ("points", True),
        ("id", "seven"),
        ("id", False),
    ])
    def test_from_dict_rejects_mistyped_field(self, sample_questions, field, value):
        raw = sample_questions[2].to_dict()
        raw[field] = value
        with pytest.raises(ValueError):
            Question.from_dict(raw)

    def test_from_dict_numeric_string_points(self):
        q = Question.from_dict({"id": 1, "name": "A", "type": "short_answer_question", "points": "2"})
        assert q.points == 2

    def test_from_dict_missing_key(self):
        with pytest.raises(KeyError):
            Question.from_dict({"name": "No id", "type": "short_answer_question"})


class TestAnswer:
    def test_defaults(self):
        a = Answer(question_id=4)
        assert a.text == ""
        assert a.submitted is False
        assert a.correct is False

    def test_to_dict_uses_wire_key(self):
        assert Answer(question_id=4).to_dict() == {
            "questionId": 4,
            "text": "",
            "submitted": False,
            "correct": False,
        }


class TestMakeBlankQuestion:
    def test_create(self):
        q = make_blank_question(142, "New", QuestionType.MULTIPLE_CHOICE)
        assert q.id == 142
        assert q.name == "New"
        assert q.type == QuestionType.MULTIPLE_CHOICE
        assert q.is_empty()
        assert q.points == 0
        assert q.published is False


class TestDuplicateQuestion:
    def test_only_id_changes(self, sample_questions):
        original = sample_questions[3]
        copy = duplicate_question(99, original)
        assert copy.id == 99
        assert dataclasses.replace(copy, id=original.id) == original

    def test_original_untouched(self, sample_questions):
        original = sample_questions[3]
        duplicate_question(99, original)
        assert original.id == 9
