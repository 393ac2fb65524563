from __future__ import annotations

from typing import Optional, Protocol

from .model import StudentRecord


class StudentRepository(Protocol):
    def get_by_id(self, student_id: str) -> Optional[StudentRecord]:
        raise NotImplementedError

    def set_message_state(self, *, student_id: str, week_number: int, message_state: bool) -> None:
        """Upsert the week's delivery flag; raises PersistenceError on failure."""

        raise NotImplementedError
