"""
Pipeline Stage Library - in-process aggregation stages.

Each stage is built by a factory (unwind, match, group, project, sort, limit)
and is a plain function from an iterable of rows to an iterable of rows, so a
pipeline is just a list of stages applied left to right. Rows are dicts
derived from student documents; nested values are addressed with dotted
paths such as "marks.score".

Stages stream where they can (unwind, match, project, limit) and only
materialize where the operation requires it (group, sort).
"""
from itertools import islice
from typing import Any, Callable, Dict, Iterable, List, Union
from pymongo import ASCENDING, DESCENDING

Row = Dict[str, Any]
Rows = Iterable[Row]
Stage = Callable[[Rows], Rows]
KeySpec = Union[str, Callable[[Row], Any]]

GROUP_ID = "_id"


# ═══════════════════════════════════════════════════════════════════════════════
# FIELD ACCESS
# ═══════════════════════════════════════════════════════════════════════════════

def get_path(row: Row, path: str, default: Any = None) -> Any:
    """Resolve a dotted path inside a row, returning default when any segment is missing"""
    value = row
    for part in path.split("."):
        if not isinstance(value, dict) or part not in value:
            return default
        value = value[part]
    return value

def _set_path(row: Row, path: str, value: Any) -> Row:
    """Copy of row with the dotted path replaced; untouched branches are shared"""
    head, _, rest = path.partition(".")
    out = dict(row)
    out[head] = _set_path(row.get(head) or {}, rest, value) if rest else value
    return out

def _key_func(key: KeySpec) -> Callable[[Row], Any]:
    if callable(key):
        return key
    return lambda row: get_path(row, key)


# ═══════════════════════════════════════════════════════════════════════════════
# ACCUMULATORS
# ═══════════════════════════════════════════════════════════════════════════════

class Accumulator:
    """Per-partition running aggregate used by group()"""

    def __init__(self, path: str = None):
        self.path = path

    def initial(self) -> Any:
        return None

    def step(self, state: Any, row: Row) -> Any:
        raise NotImplementedError

    def result(self, state: Any) -> Any:
        return state

    def _value(self, row: Row) -> Any:
        return get_path(row, self.path)


class Count(Accumulator):
    def initial(self):
        return 0

    def step(self, state, row):
        return state + 1


class Sum(Accumulator):
    """Sums numeric values; missing values are skipped, an empty partition sums to 0"""

    def initial(self):
        return 0

    def step(self, state, row):
        value = self._value(row)
        return state + value if isinstance(value, (int, float)) else state


class Avg(Accumulator):
    def initial(self):
        return (0, 0)

    def step(self, state, row):
        value = self._value(row)
        if not isinstance(value, (int, float)):
            return state
        total, n = state
        return (total + value, n + 1)

    def result(self, state):
        total, n = state
        return total / n if n else None


class Min(Accumulator):
    def step(self, state, row):
        value = self._value(row)
        if value is None:
            return state
        return value if state is None or value < state else state


class Max(Accumulator):
    def step(self, state, row):
        value = self._value(row)
        if value is None:
            return state
        return value if state is None or value > state else state


class First(Accumulator):
    _UNSET = object()

    def initial(self):
        return self._UNSET

    def step(self, state, row):
        return self._value(row) if state is self._UNSET else state

    def result(self, state):
        return None if state is self._UNSET else state


def count_of() -> Accumulator:
    return Count()

def sum_of(path: str) -> Accumulator:
    return Sum(path)

def avg_of(path: str) -> Accumulator:
    return Avg(path)

def min_of(path: str) -> Accumulator:
    return Min(path)

def max_of(path: str) -> Accumulator:
    return Max(path)

def first_of(path: str) -> Accumulator:
    return First(path)


# ═══════════════════════════════════════════════════════════════════════════════
# STAGES
# ═══════════════════════════════════════════════════════════════════════════════

def unwind(field: str) -> Stage:
    """One output row per element of a list field; empty or missing lists emit nothing"""
    def stage(rows: Rows) -> Rows:
        for row in rows:
            values = get_path(row, field)
            if not isinstance(values, (list, tuple)):
                continue
            for value in values:
                yield _set_path(row, field, value)
    return stage

def match(predicate: Callable[[Row], bool]) -> Stage:
    """Keep rows satisfying predicate, relative order preserved"""
    def stage(rows: Rows) -> Rows:
        return (row for row in rows if predicate(row))
    return stage

def group(key: KeySpec, **accumulators: Accumulator) -> Stage:
    """
    Partition rows by key and aggregate each partition.

    Emits one row per distinct key, shaped {"_id": key, <name>: <aggregate>...},
    in the order keys were first seen. Callers that need a specific order
    must sort afterwards.
    """
    key_of = _key_func(key)

    def stage(rows: Rows) -> Rows:
        partitions: Dict[Any, Dict[str, Any]] = {}
        for row in rows:
            k = key_of(row)
            states = partitions.get(k)
            if states is None:
                states = {name: acc.initial() for name, acc in accumulators.items()}
                partitions[k] = states
            for name, acc in accumulators.items():
                states[name] = acc.step(states[name], row)
        for k, states in partitions.items():
            out = {GROUP_ID: k}
            out.update({name: accumulators[name].result(state) for name, state in states.items()})
            yield out
    return stage

def project(*fields: str, **computed: Callable[[Row], Any]) -> Stage:
    """Keep only the named fields (dotted paths keep their last segment) plus computed ones"""
    def stage(rows: Rows) -> Rows:
        for row in rows:
            out = {path.rsplit(".", 1)[-1]: get_path(row, path) for path in fields}
            for name, func in computed.items():
                out[name] = func(row)
            yield out
    return stage

def sort(field: KeySpec, direction: int = ASCENDING) -> Stage:
    """Stable sort on one field; ties keep their prior relative order"""
    key_of = _key_func(field)

    def sort_key(row: Row):
        value = key_of(row)
        # None sorts before any value
        return (value is not None, value if value is not None else 0)

    def stage(rows: Rows) -> Rows:
        return sorted(rows, key=sort_key, reverse=direction == DESCENDING)
    return stage

def limit(n: int) -> Stage:
    """First n rows; n <= 0 yields nothing"""
    def stage(rows: Rows) -> Rows:
        if n <= 0:
            return iter(())
        return islice(rows, n)
    return stage


def run_pipeline(rows: Rows, pipeline: List[Stage]) -> List[Row]:
    """Evaluate stages left to right and materialize the final rows"""
    for stage in pipeline:
        rows = stage(rows)
    return list(rows)
