"""
OperationResult - tagged return value for operations that can fail.

NotFound and Conflict are ordinary outcomes of the student operations, so
they are returned rather than raised:

    result = service.get_marks(7)
    if result.is_not_found:
        ...
    marks = result.unwrap()   # raises StudentNotFoundError instead

Store failures (StoreUnavailableError) are still raised.
"""
from dataclasses import dataclass
from typing import Any
from students_service.exceptions.exceptions import StudentAlreadyExistsError, StudentNotFoundError

OK = "ok"
NOT_FOUND = "not_found"
CONFLICT = "conflict"


@dataclass(frozen=True)
class OperationResult:
    status: str
    value: Any = None
    message: str = None

    @classmethod
    def success(cls, value: Any) -> "OperationResult":
        return cls(OK, value)

    @classmethod
    def not_found(cls, message: str) -> "OperationResult":
        return cls(NOT_FOUND, None, message)

    @classmethod
    def conflict(cls, message: str) -> "OperationResult":
        return cls(CONFLICT, None, message)

    @property
    def ok(self) -> bool:
        return self.status == OK

    @property
    def is_not_found(self) -> bool:
        return self.status == NOT_FOUND

    @property
    def is_conflict(self) -> bool:
        return self.status == CONFLICT

    def unwrap(self) -> Any:
        """Return the value, or raise the typed error matching the failure."""
        if self.status == NOT_FOUND:
            raise StudentNotFoundError(self.message)
        if self.status == CONFLICT:
            raise StudentAlreadyExistsError(self.message)
        return self.value
