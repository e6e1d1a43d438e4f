"""Student Domain Pipelines - Flow-Based Organization (SoC)"""
from datetime import date
from typing import List
from pymongo import ASCENDING, DESCENDING
from students_service.config.settings import EXCELLENT_SCORE, GROUP_BY_ID
from students_service.pipeline.stages import (
    Stage, unwind, match, group, project, sort, limit,
    count_of, avg_of, first_of
)

STUDENT_FIELDS = ("id", "name", "phone")
MARK_FIELDS = ("marks.subject", "marks.date", "marks.score")


def _ranking_key(group_key: str) -> str:
    return "id" if group_key == GROUP_BY_ID else "name"

def _scores(doc) -> List[int]:
    return [m["score"] for m in doc.get("marks") or []]

# ═══════════════════════════════════════════════════════════════════════════════
# WHOLE-STUDENT FILTER PIPELINES
# ═══════════════════════════════════════════════════════════════════════════════

def build_all_good_marks_pipeline(threshold: int) -> List[Stage]:
    """Students with at least one mark and every score >= threshold"""
    def all_good(doc):
        scores = _scores(doc)
        return bool(scores) and all(score >= threshold for score in scores)

    return [match(all_good), project(*STUDENT_FIELDS)]

def build_few_marks_pipeline(threshold_count: int) -> List[Stage]:
    """Students with fewer than threshold_count marks"""
    return [
        match(lambda doc: len(doc.get("marks") or []) < threshold_count),
        project(*STUDENT_FIELDS)
    ]

def build_all_good_marks_subject_pipeline(subject: str, threshold: int) -> List[Stage]:
    """Students with at least one mark of subject and every such score >= threshold"""
    def all_good_in_subject(doc):
        scores = [m["score"] for m in doc.get("marks") or [] if m["subject"] == subject]
        return bool(scores) and all(score >= threshold for score in scores)

    return [match(all_good_in_subject), project(*STUDENT_FIELDS)]

def build_marks_amount_between_pipeline(min_amount: int, max_amount: int) -> List[Stage]:
    """Students whose mark count lies in [min_amount, max_amount]"""
    return [
        match(lambda doc: min_amount <= len(doc.get("marks") or []) <= max_amount),
        project(*STUDENT_FIELDS)
    ]

def build_phone_pipeline(phone: str) -> List[Stage]:
    return [match(lambda doc: doc.get("phone") == phone), project(*STUDENT_FIELDS), limit(1)]

def build_phone_prefix_pipeline(prefix: str) -> List[Stage]:
    return [
        match(lambda doc: (doc.get("phone") or "").startswith(prefix)),
        project(*STUDENT_FIELDS)
    ]

# ═══════════════════════════════════════════════════════════════════════════════
# PER-STUDENT MARK PIPELINES (run over the single student document)
# ═══════════════════════════════════════════════════════════════════════════════

def build_subject_marks_pipeline(subject: str) -> List[Stage]:
    return [
        unwind("marks"),
        match(lambda row: row["marks"]["subject"] == subject),
        project(*MARK_FIELDS)
    ]

def build_marks_at_dates_pipeline(date_from: date, date_to: date) -> List[Stage]:
    """Marks dated within [date_from, date_to]; an inverted range matches nothing"""
    return [
        unwind("marks"),
        match(lambda row: date_from <= row["marks"]["date"] <= date_to),
        project(*MARK_FIELDS)
    ]

# ═══════════════════════════════════════════════════════════════════════════════
# CROSS-STUDENT RANKING PIPELINES
# ═══════════════════════════════════════════════════════════════════════════════

def build_avg_score_greater_pipeline(threshold: int, group_key: str) -> List[Stage]:
    """Mean score per student group, kept when strictly above threshold, best first"""
    return [
        unwind("marks"),
        group(_ranking_key(group_key), name=first_of("name"), avgScore=avg_of("marks.score")),
        match(lambda row: row["avgScore"] > threshold),
        sort("avgScore", DESCENDING),
        project("name", avgScore=lambda row: int(row["avgScore"]))
    ]

def build_best_students_pipeline(n_students: int, group_key: str) -> List[Stage]:
    """Most marks above EXCELLENT_SCORE; students without such marks never appear"""
    return [
        unwind("marks"),
        match(lambda row: row["marks"]["score"] > EXCELLENT_SCORE),
        group(_ranking_key(group_key), name=first_of("name"), excellentCount=count_of()),
        sort("excellentCount", DESCENDING),
        limit(n_students),
        project("name")
    ]

def build_worst_students_pipeline(n_students: int) -> List[Stage]:
    """Lowest total score per student document; students without marks total 0"""
    return [
        project("name", totalScore=lambda doc: sum(_scores(doc))),
        sort("totalScore", ASCENDING),
        limit(n_students),
        project("name")
    ]
