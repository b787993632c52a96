"""
Attendance grid
Each submitted course becomes one row with a present/absent mark per weekday
"""
import threading
from typing import Iterable, List, Optional

from log_config import get_logger
from models import AttendanceCell, AttendanceRow

log = get_logger(__name__)

PRESENT = "✅"
ABSENT = "❌"
COURSE_FIELD = "courseName"


class AttendanceGrid:
    def __init__(self, day_order: Iterable[str]):
        self.day_order: List[str] = list(day_order)
        if not self.day_order:
            raise ValueError("An attendance grid needs at least one day")
        self.rows: List[AttendanceRow] = []
        self.focus = COURSE_FIELD
        self._lock = threading.Lock()

    def build_row(self, course_name: str, checked_days: Iterable[str]) -> AttendanceRow:
        checked = set(checked_days)
        cells = [
            AttendanceCell(day=day, mark=PRESENT if day in checked else ABSENT)
            for day in self.day_order
        ]
        return AttendanceRow(course_name=course_name, cells=cells)

    def handle_submit(self, course_name: str, checked_days: Iterable[str]) -> Optional[AttendanceRow]:
        """Append a row for the course; a blank name is ignored without a message"""
        course_name = (course_name or "").strip()
        if not course_name:
            log.debug("attendance_submit_ignored", reason="empty course name")
            return None

        row = self.build_row(course_name, checked_days)
        with self._lock:
            self.rows.append(row)
            # Form comes back empty with the cursor in the course field
            self.focus = COURSE_FIELD

        present = [cell.day for cell in row.cells if cell.mark == PRESENT]
        log.info("📝 attendance_row_added", course=course_name, present=present)
        return row
