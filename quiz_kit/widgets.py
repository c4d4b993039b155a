"""Small single-owner state containers behind the quiz page buttons."""
from __future__ import annotations

from dataclasses import dataclass

# Christmas, Valentine's Day, Mid-Autumn Festival, Halloween, Thanksgiving
HOLIDAYS_BY_YEAR = ("🎄", "💌", "🥮", "🎃", "🦃")
# Christmas, Halloween, Mid-Autumn Festival, Thanksgiving, Valentine's Day
HOLIDAYS_BY_ALPHABET = ("🎄", "🎃", "🥮", "🦃", "💌")

HOLIDAY_NAMES = {
    "🎄": "Christmas",
    "💌": "Valentine's Day",
    "🥮": "Mid-Autumn Festival",
    "🎃": "Halloween",
    "🦃": "Thanksgiving",
}


class WidgetActionError(ValueError):
    """Raised for a transition the widget currently disallows."""


@dataclass
class DoubleHalf:
    value: float = 10

    def double(self) -> dict:
        self.value = self.value * 2
        return self.to_dict()

    def halve(self) -> dict:
        self.value = self.value / 2
        return self.to_dict()

    def to_dict(self) -> dict:
        return {"value": self.value}


@dataclass
class CycleHoliday:
    holiday: str = HOLIDAYS_BY_YEAR[0]

    def _advance(self, order: tuple[str, ...]) -> dict:
        i = order.index(self.holiday)
        self.holiday = order[(i + 1) % len(order)]
        return self.to_dict()

    def next_by_year(self) -> dict:
        return self._advance(HOLIDAYS_BY_YEAR)

    def next_by_alphabet(self) -> dict:
        return self._advance(HOLIDAYS_BY_ALPHABET)

    def to_dict(self) -> dict:
        return {"holiday": self.holiday, "name": HOLIDAY_NAMES[self.holiday]}


@dataclass
class StartAttempt:
    """Attempt counter for a quiz.

    Starting uses up one attempt; a mulligan grants one back. Neither is
    possible while a quiz is in progress, and starting needs at least one
    attempt left.
    """

    attempts: int = 4
    in_progress: bool = False

    @property
    def can_start(self) -> bool:
        return not self.in_progress and self.attempts > 0

    @property
    def can_stop(self) -> bool:
        return self.in_progress

    @property
    def can_mulligan(self) -> bool:
        return not self.in_progress

    def start(self) -> dict:
        if not self.can_start:
            raise WidgetActionError(
                "Quiz already in progress" if self.in_progress else "No attempts left"
            )
        self.attempts -= 1
        self.in_progress = True
        return self.to_dict()

    def stop(self) -> dict:
        if not self.can_stop:
            raise WidgetActionError("No quiz in progress")
        self.in_progress = False
        return self.to_dict()

    def mulligan(self) -> dict:
        if not self.can_mulligan:
            raise WidgetActionError("Cannot add an attempt while a quiz is in progress")
        self.attempts += 1
        return self.to_dict()

    def to_dict(self) -> dict:
        return {
            "attempts": self.attempts,
            "in_progress": self.in_progress,
            "can_start": self.can_start,
            "can_stop": self.can_stop,
            "can_mulligan": self.can_mulligan,
        }
