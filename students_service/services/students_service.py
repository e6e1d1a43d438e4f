"""Students Service - single entry point over mutations, queries and rankings"""
from datetime import date
from typing import List, Optional
from students_service.models.student import Mark, NameAvgScore, StudentInfo
from students_service.repositories.core.repository_factory import RepositoryFactory
from students_service.repositories.student.student_repo import StudentRepo
from students_service.services.core.result import OperationResult
from students_service.services.report.ranking_service import RankingService
from students_service.services.student.student_mutation_service import StudentMutationService
from students_service.services.student.student_query_service import StudentQueryService

class StudentsService:
    def __init__(self, student_repo: StudentRepo = None, group_key: str = None):
        # Dependency injection (DIP)
        self.student_repo = student_repo or RepositoryFactory.get_student_repo()
        self.mutations = StudentMutationService(self.student_repo)
        self.queries = StudentQueryService(self.student_repo)
        self.rankings = RankingService(self.student_repo, group_key)

    def add_student(self, student_id: int, name: str, phone: str) -> OperationResult:
        return self.mutations.add_student(student_id, name, phone)

    def update_phone(self, student_id: int, phone: str) -> OperationResult:
        return self.mutations.update_phone(student_id, phone)

    def add_mark(self, student_id: int, mark: Mark) -> OperationResult:
        return self.mutations.add_mark(student_id, mark)

    def remove_student(self, student_id: int) -> OperationResult:
        return self.mutations.remove_student(student_id)

    def get_marks(self, student_id: int) -> OperationResult:
        return self.queries.get_marks(student_id)

    def get_student_by_phone(self, phone: str) -> Optional[StudentInfo]:
        return self.queries.get_student_by_phone(phone)

    def get_students_by_phone_prefix(self, prefix: str) -> List[StudentInfo]:
        return self.queries.get_students_by_phone_prefix(prefix)

    def get_students_all_good_marks(self, threshold: int) -> List[StudentInfo]:
        return self.queries.get_students_all_good_marks(threshold)

    def get_students_few_marks(self, threshold_count: int) -> List[StudentInfo]:
        return self.queries.get_students_few_marks(threshold_count)

    def get_students_all_good_marks_subject(self, subject: str, threshold: int) -> List[StudentInfo]:
        return self.queries.get_students_all_good_marks_subject(subject, threshold)

    def get_students_marks_amount_between(self, min_amount: int, max_amount: int) -> List[StudentInfo]:
        return self.queries.get_students_marks_amount_between(min_amount, max_amount)

    def get_student_subject_marks(self, student_id: int, subject: str) -> OperationResult:
        return self.queries.get_student_subject_marks(student_id, subject)

    def get_student_avg_score_greater(self, threshold: int) -> List[NameAvgScore]:
        return self.rankings.get_student_avg_score_greater(threshold)

    def get_student_marks_at_dates(self, student_id: int, date_from: date, date_to: date) -> OperationResult:
        return self.queries.get_student_marks_at_dates(student_id, date_from, date_to)

    def get_best_students(self, n_students: int) -> List[str]:
        return self.rankings.get_best_students(n_students)

    def get_worst_students(self, n_students: int) -> List[str]:
        return self.rankings.get_worst_students(n_students)
