"""Ranking Service - cross-student averages, best and worst students"""
import logging
from typing import List
from students_service.config.settings import RankingConfig
from students_service.models.student import NameAvgScore
from students_service.repositories.student.student_repo import StudentRepo
from students_service.repositories.student import student_pipelines as pipelines

logger = logging.getLogger(__name__)

class RankingService:
    """
    Rankings over every student's marks.

    Average and best rankings group per student name by default, which merges
    distinct students sharing a name; pass group_key="id" to keep them apart.
    Worst ranking is always per student document.
    """

    def __init__(self, student_repo: StudentRepo, group_key: str = None):
        self.student_repo = student_repo
        self.group_key = group_key or RankingConfig.GROUP_KEY

    def get_student_avg_score_greater(self, threshold: int) -> List[NameAvgScore]:
        rows = self.student_repo.aggregate(
            pipelines.build_avg_score_greater_pipeline(threshold, self.group_key)
        )
        result = [NameAvgScore(row["name"], row["avgScore"]) for row in rows]
        logger.debug(f"result: {result}")
        return result

    def get_best_students(self, n_students: int) -> List[str]:
        if n_students <= 0:
            return []
        rows = self.student_repo.aggregate(
            pipelines.build_best_students_pipeline(n_students, self.group_key)
        )
        return [row["name"] for row in rows]

    def get_worst_students(self, n_students: int) -> List[str]:
        if n_students <= 0:
            return []
        rows = self.student_repo.aggregate(pipelines.build_worst_students_pipeline(n_students))
        return [row["name"] for row in rows]
