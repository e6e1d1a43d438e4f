"""Formatting utilities - DTO serialization"""
from .json_utils import serialize_mark, serialize_student, serialize_avg_score, serialize_value
