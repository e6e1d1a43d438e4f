"""Student Query Service - whole-student filters and per-student mark extraction"""
import logging
from datetime import date
from typing import List, Optional
from students_service.models.student import Mark, StudentInfo, info_from_row
from students_service.repositories.student.student_repo import StudentRepo
from students_service.repositories.student import student_pipelines as pipelines
from students_service.services.core.result import OperationResult

logger = logging.getLogger(__name__)

class StudentQueryService:
    def __init__(self, student_repo: StudentRepo):
        self.student_repo = student_repo

    # ── whole-student filters ────────────────────────────────────────

    def get_student_by_phone(self, phone: str) -> Optional[StudentInfo]:
        rows = self.student_repo.aggregate(pipelines.build_phone_pipeline(phone))
        return info_from_row(rows[0]) if rows else None

    def get_students_by_phone_prefix(self, prefix: str) -> List[StudentInfo]:
        students = self._students(pipelines.build_phone_prefix_pipeline(prefix))
        logger.debug(f"number of the students having phone prefix {prefix} is {len(students)}")
        return students

    def get_students_all_good_marks(self, threshold: int) -> List[StudentInfo]:
        return self._students(pipelines.build_all_good_marks_pipeline(threshold))

    def get_students_few_marks(self, threshold_count: int) -> List[StudentInfo]:
        if threshold_count <= 0:
            return []
        return self._students(pipelines.build_few_marks_pipeline(threshold_count))

    def get_students_all_good_marks_subject(self, subject: str, threshold: int) -> List[StudentInfo]:
        return self._students(pipelines.build_all_good_marks_subject_pipeline(subject, threshold))

    def get_students_marks_amount_between(self, min_amount: int, max_amount: int) -> List[StudentInfo]:
        if min_amount > max_amount:
            return []
        return self._students(pipelines.build_marks_amount_between_pipeline(min_amount, max_amount))

    # ── per-student marks ────────────────────────────────────────────

    def get_marks(self, student_id: int) -> OperationResult:
        doc = self.student_repo.find_by_id(student_id)
        if doc is None:
            return _not_found(student_id)
        return OperationResult.success([Mark.from_document(m) for m in doc.get("marks") or []])

    def get_student_subject_marks(self, student_id: int, subject: str) -> OperationResult:
        rows = self.student_repo.aggregate_student(student_id, pipelines.build_subject_marks_pipeline(subject))
        if rows is None:
            return _not_found(student_id)
        logger.debug(f"student {student_id} has {len(rows)} marks of subject {subject}")
        return OperationResult.success([Mark.from_document(row) for row in rows])

    def get_student_marks_at_dates(self, student_id: int, date_from: date, date_to: date) -> OperationResult:
        rows = self.student_repo.aggregate_student(
            student_id, pipelines.build_marks_at_dates_pipeline(date_from, date_to)
        )
        if rows is None:
            return _not_found(student_id)
        return OperationResult.success([Mark.from_document(row) for row in rows])

    def _students(self, pipeline) -> List[StudentInfo]:
        return [info_from_row(row) for row in self.student_repo.aggregate(pipeline)]

def _not_found(student_id: int) -> OperationResult:
    return OperationResult.not_found(f"Student {student_id} not found")
