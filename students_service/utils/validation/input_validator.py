"""Centralized Input Validation - DRY Implementation"""
from datetime import date
from typing import Any, Dict
from students_service.exceptions.exceptions import ValidationError
from students_service.models.student import Mark
from students_service.utils.time.timeutils import parse_date

class InputValidator:
    """Request value conversion; only malformed values are errors, odd ranges are not"""

    @staticmethod
    def validate_required_fields(data: Dict, *fields: str) -> None:
        missing = [f for f in fields if data.get(f) is None or data.get(f) == ""]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    @staticmethod
    def to_int(value: Any, field_name: str) -> int:
        if isinstance(value, bool):
            raise ValidationError(f"{field_name} must be an integer")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValidationError(f"{field_name} must be an integer")

    @staticmethod
    def to_date(value: Any, field_name: str) -> date:
        try:
            return parse_date(value)
        except (TypeError, ValueError):
            raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")

    @staticmethod
    def validate_student_request(data: Dict) -> Dict:
        InputValidator.validate_required_fields(data, "id", "name", "phone")
        return {
            "id": InputValidator.to_int(data["id"], "id"),
            "name": str(data["name"]),
            "phone": str(data["phone"])
        }

    @staticmethod
    def validate_mark_request(data: Dict) -> Mark:
        InputValidator.validate_required_fields(data, "subject", "date", "score")
        try:
            return Mark(
                subject=str(data["subject"]),
                date=InputValidator.to_date(data["date"], "date"),
                score=InputValidator.to_int(data["score"], "score")
            )
        except ValueError as e:
            raise ValidationError(str(e))

def get_json_data():
    """Centralized JSON parsing; anything but a JSON object counts as an empty body"""
    from flask import request
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}

def get_single_query_param(param_name, required=True, default=None):
    """Get single query parameter with validation"""
    from flask import request
    value = request.args.get(param_name, default)

    if required and value is None:
        raise ValidationError(f"Missing required parameter: {param_name}")

    return value

def get_int_query_param(param_name, required=True, default=None) -> int:
    value = get_single_query_param(param_name, required, default)
    return value if value is None else InputValidator.to_int(value, param_name)
