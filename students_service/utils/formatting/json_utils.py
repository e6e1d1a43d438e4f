"""JSON serialization utilities for student DTOs"""
from datetime import date, datetime
from typing import Any, Dict
from students_service.models.student import Mark, NameAvgScore, StudentInfo
from students_service.utils.time.timeutils import format_date

def serialize_mark(mark: Mark) -> Dict:
    return {"subject": mark.subject, "date": format_date(mark.date), "score": mark.score}

def serialize_student(student: StudentInfo) -> Dict:
    return {"id": student.id, "name": student.name, "phone": student.phone}

def serialize_avg_score(item: NameAvgScore) -> Dict:
    return {"name": item.name, "avgScore": item.avg_score}

def serialize_value(obj: Any) -> Any:
    """Convert service results to JSON serializable format"""
    if isinstance(obj, Mark):
        return serialize_mark(obj)
    elif isinstance(obj, NameAvgScore):
        return serialize_avg_score(obj)
    elif isinstance(obj, StudentInfo):
        return serialize_student(obj)
    elif isinstance(obj, (date, datetime)):
        return obj.isoformat()
    elif isinstance(obj, list):
        return [serialize_value(item) for item in obj]
    return obj
