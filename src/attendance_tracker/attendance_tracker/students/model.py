from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import HomeworkStatus


def _first(doc: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in doc and doc[key] is not None:
            return doc[key]
    return default


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    if not text or text == "undefined":
        return None
    return text


@dataclass(frozen=True)
class WeekRecord:
    """Domain entity: one week of a student's term.

    Optional fields are normalised once, here, so consumers never need to
    re-check for blanks or the ``"undefined"`` placeholder.
    """

    attended: bool = False
    last_attendance: Optional[str] = None
    homework_status: HomeworkStatus = HomeworkStatus.NOT_DONE
    quiz_score: Optional[str] = None
    comment: Optional[str] = None
    message_state: bool = False

    def __post_init__(self):
        object.__setattr__(self, "attended", bool(self.attended))
        object.__setattr__(self, "last_attendance", _optional_text(self.last_attendance))
        object.__setattr__(self, "homework_status", HomeworkStatus.coerce(self.homework_status))
        object.__setattr__(self, "quiz_score", _optional_text(self.quiz_score))
        object.__setattr__(self, "comment", _optional_text(self.comment))
        object.__setattr__(self, "message_state", bool(self.message_state))

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "WeekRecord":
        """Build from a stored document or MySQL row (camelCase or snake_case keys)."""
        return cls(
            attended=_first(doc, "attended", "attended_the_session", default=False),
            last_attendance=_first(doc, "lastAttendance", "last_attendance"),
            homework_status=_first(doc, "homeworkStatus", "homework_status", "hwDone"),
            quiz_score=_first(doc, "quizScore", "quiz_score", "quizDegree", "quiz_degree"),
            comment=doc.get("comment"),
            message_state=_first(doc, "messageState", "message_state", default=False),
        )

    def to_dict(self) -> dict:
        return {
            "attended": self.attended,
            "lastAttendance": self.last_attendance,
            "homeworkStatus": self.homework_status.value,
            "quizScore": self.quiz_score,
            "comment": self.comment,
            "messageState": self.message_state,
        }


@dataclass(frozen=True)
class StudentRecord:
    """Domain entity: a student as stored by the record layer.

    ``weeks[0]`` is week 1.
    """

    id: str
    name: str
    guardian_phone: Optional[str]
    weeks: Sequence[WeekRecord] = field(default_factory=tuple)

    @property
    def first_name(self) -> str:
        parts = (self.name or "").split()
        return parts[0] if parts else ""

    def week(self, week_number: int) -> WeekRecord:
        """Return the record for a 1-based week, or a blank week if none is stored."""
        index = int(week_number) - 1
        if 0 <= index < len(self.weeks):
            return self.weeks[index]
        return WeekRecord()

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "StudentRecord":
        weeks = tuple(WeekRecord.from_document(w or {}) for w in (doc.get("weeks") or []))
        return cls(
            id=str(_first(doc, "id", "_id", default="")).strip(),
            name=str(doc.get("name") or "").strip(),
            guardian_phone=_first(doc, "guardianPhone", "guardian_phone", "parents_phone"),
            weeks=weeks,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "guardianPhone": self.guardian_phone,
            "weeks": [w.to_dict() for w in self.weeks],
        }
