from __future__ import annotations

from typing import Optional

from ..core.exceptions import PersistenceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import StudentRecord, WeekRecord
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: str) -> Optional[StudentRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, parents_phone FROM students WHERE id=%s",
                (student_id,),
            )
            row = fetchone(cur)
            if not row:
                return None

            cur.execute(
                """
                SELECT week_number, attended, last_attendance, homework_status,
                       quiz_degree, comment, message_state
                FROM student_weeks
                WHERE student_id=%s
                ORDER BY week_number
                """,
                (student_id,),
            )
            by_number = {int(r["week_number"]): WeekRecord.from_document(r) for r in fetchall(cur)}

        # Weeks are dense from 1; gaps render as blank weeks.
        last = max(by_number) if by_number else 0
        weeks = tuple(by_number.get(n, WeekRecord()) for n in range(1, last + 1))
        return StudentRecord(
            id=str(row["id"]),
            name=row["name"] or "",
            guardian_phone=row.get("parents_phone"),
            weeks=weeks,
        )

    def set_message_state(self, *, student_id: str, week_number: int, message_state: bool) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS ok FROM students WHERE id=%s", (student_id,))
            if not fetchone(cur):
                raise PersistenceError(f"Student {student_id} does not exist")
            cur.execute(
                """
                INSERT INTO student_weeks(student_id, week_number, message_state)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE message_state=VALUES(message_state)
                """,
                (student_id, int(week_number), 1 if message_state else 0),
            )
