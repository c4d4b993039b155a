from __future__ import annotations

from dataclasses import dataclass, field


class QuestionType:
    MULTIPLE_CHOICE = "multiple_choice_question"
    SHORT_ANSWER = "short_answer_question"

    ALL = (MULTIPLE_CHOICE, SHORT_ANSWER)


@dataclass(frozen=True)
class Question:
    id: int
    name: str
    type: str  # multiple_choice_question | short_answer_question
    body: str = ""
    expected: str = ""
    options: tuple[str, ...] = field(default_factory=tuple)
    points: int = 0
    published: bool = False

    def is_empty(self) -> bool:
        return self.body == "" and self.expected == "" and len(self.options) == 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "body": self.body,
            "expected": self.expected,
            "options": list(self.options),
            "points": self.points,
            "published": self.published,
        }

    @classmethod
    def from_dict(cls, raw: dict) -> Question:
        """Build a Question from a JSON object, raising ValueError on mistyped fields.

        Integer fields also accept numeric strings; nothing else is coerced.
        """
        id_ = _as_int(raw["id"], "id")
        name, type_ = raw["name"], raw["type"]
        body, expected = raw.get("body", ""), raw.get("expected", "")
        for key, value in (("name", name), ("type", type_), ("body", body), ("expected", expected)):
            if not isinstance(value, str):
                raise ValueError(f"{key} must be a string")
        options = raw.get("options", [])
        if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
            raise ValueError("options must be a list of strings")
        published = raw.get("published", False)
        if not isinstance(published, bool):
            raise ValueError("published must be true or false")
        return cls(
            id=id_,
            name=name,
            type=type_,
            body=body,
            expected=expected,
            options=tuple(options),
            points=_as_int(raw.get("points", 0), "points"),
            published=published,
        )


def _as_int(value, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{key} must be an integer")
    return int(value)


@dataclass(frozen=True)
class Answer:
    question_id: int
    text: str = ""
    submitted: bool = False
    correct: bool = False

    def to_dict(self) -> dict:
        return {
            "questionId": self.question_id,
            "text": self.text,
            "submitted": self.submitted,
            "correct": self.correct,
        }
