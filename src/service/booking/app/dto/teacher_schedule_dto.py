from datetime import datetime
from typing import Optional

import attrs


@attrs.define(frozen=True)
class TeacherScheduleDto:
    class_id: int
    class_name: str
    max_capacity: int
    time_id: int
    start_at: datetime
    end_at: datetime
    confirmed_student_count: int = 0
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@attrs.define(frozen=True)
class EnrolledStudentDto:
    student_id: int
    student_name: str
    student_email: str
