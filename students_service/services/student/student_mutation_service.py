"""Student Mutation Service - Business Logic Layer (SoC)"""
import logging
from students_service.models.student import Mark, Student
from students_service.repositories.student.student_repo import StudentRepo
from students_service.services.core.result import OperationResult

logger = logging.getLogger(__name__)

class StudentMutationService:
    """
    Add / update / remove students.

    Every mutation is a single atomic store operation on one document, so
    concurrent appends to the same student are never lost, whichever service
    instance or process issues them.
    """

    def __init__(self, student_repo: StudentRepo):
        self.student_repo = student_repo

    def add_student(self, student_id: int, name: str, phone: str) -> OperationResult:
        student = Student(student_id, name, phone)
        if not self.student_repo.insert(student.to_document()):
            return OperationResult.conflict(f"Student {student_id} already exists")
        logger.debug(f"saved {student.projection()}")
        return OperationResult.success(student.projection())

    def update_phone(self, student_id: int, phone: str) -> OperationResult:
        before = self.student_repo.set_phone(student_id, phone)
        if before is None:
            return _not_found(student_id)
        student = Student.from_document(before)
        old_phone, student.phone = student.phone, phone
        logger.debug(f"Student {student_id}, old phone number {old_phone}, new phone number {phone}")
        return OperationResult.success(student.projection())

    def add_mark(self, student_id: int, mark: Mark) -> OperationResult:
        doc = self.student_repo.push_mark(student_id, mark.to_document())
        if doc is None:
            return _not_found(student_id)
        logger.debug(f"Student {student_id} added mark {mark}")
        return OperationResult.success(Student.from_document(doc).marks)

    def remove_student(self, student_id: int) -> OperationResult:
        doc = self.student_repo.delete_by_id(student_id)
        if doc is None:
            return _not_found(student_id)
        student = Student.from_document(doc)
        logger.debug(f"removed student {student_id}, marks {student.marks}")
        return OperationResult.success(student.projection())

def _not_found(student_id: int) -> OperationResult:
    return OperationResult.not_found(f"Student {student_id} not found")
