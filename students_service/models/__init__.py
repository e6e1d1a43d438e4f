"""Domain models - Student, Mark and query projections"""
from .student import Mark, Student, StudentInfo, NameAvgScore, info_from_row

__all__ = [
    'Mark',
    'Student',
    'StudentInfo',
    'NameAvgScore',
    'info_from_row'
]
