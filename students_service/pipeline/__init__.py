"""Aggregation stages - unwind, match, group, project, sort, limit"""
from .stages import (
    unwind, match, group, project, sort, limit, run_pipeline, get_path,
    count_of, sum_of, avg_of, min_of, max_of, first_of, GROUP_ID
)
