"""Students marks service - student records, embedded marks and analytical queries"""
from students_service.models.student import Mark, Student, StudentInfo, NameAvgScore
from students_service.services.core.result import OperationResult
from students_service.services.students_service import StudentsService

__all__ = [
    'Mark',
    'Student',
    'StudentInfo',
    'NameAvgScore',
    'OperationResult',
    'StudentsService'
]
