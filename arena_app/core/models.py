"""Domain models for the game arena."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from arena_app.constants.game_constants import CHOICE_KEYS


@dataclass(frozen=True, slots=True)
class Question:
    """Trivia item fetched for a module. Matching only uses question and correct_answer."""

    id: int | str | None
    question: str
    choice_a: str = ""
    choice_b: str = ""
    choice_c: str = ""
    choice_d: str = ""
    correct_answer: str = ""

    def choice(self, key: str) -> str:
        if key not in CHOICE_KEYS:
            raise KeyError(key)
        return getattr(self, key)

    def choices(self) -> dict[str, str]:
        return {key: getattr(self, key) for key in CHOICE_KEYS}

    def is_correct(self, answer: str | None) -> bool:
        return answer is not None and answer == self.correct_answer


class CardSide(Enum):
    QUESTION = "q"
    ANSWER = "a"


@dataclass(frozen=True, slots=True)
class Card:
    """One half of a matching pair."""

    id: str
    side: CardSide
    pair: int
    text: str


@dataclass(frozen=True, slots=True)
class FinalResult:
    """Score summary produced exactly once when a session completes."""

    session_id: str
    student_id: int | str | None
    module_id: int | str | None
    game_name: str
    correct: int
    total: int

    def __post_init__(self) -> None:
        total = max(0, int(self.total))
        object.__setattr__(self, "total", total)
        object.__setattr__(self, "correct", max(0, min(int(self.correct), total)))

    @property
    def percentage(self) -> int:
        return round(self.correct / (self.total or 1) * 100)

    def to_payload(self) -> dict[str, Any]:
        return {
            "student_id": self.student_id,
            "module_id": self.module_id,
            "game_name": self.game_name,
            "correct": self.correct,
            "total": self.total,
        }


@dataclass(slots=True)
class UserProfile:
    """Locally cached user record. Only the result reporter changes ``xp``."""

    id: int | str | None = None
    fullname: str = ""
    avatar: str | None = None
    xp: int = 0
    streak: int = 0
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "UserProfile":
        known = {"id", "fullname", "avatar", "xp", "streak"}
        return cls(
            id=payload.get("id"),
            fullname=payload.get("fullname") or "",
            avatar=payload.get("avatar"),
            xp=int(payload.get("xp") or 0),
            streak=int(payload.get("streak") or 0),
            extra={key: value for key, value in payload.items() if key not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        payload = dict(self.extra)
        payload.update(
            {
                "id": self.id,
                "fullname": self.fullname,
                "avatar": self.avatar,
                "xp": self.xp,
                "streak": self.streak,
            }
        )
        return payload


@dataclass(frozen=True, slots=True)
class ReportOutcome:
    """What the scoring API granted for a submitted result."""

    result: FinalResult
    xp_earned: int
    profile: UserProfile | None = None
