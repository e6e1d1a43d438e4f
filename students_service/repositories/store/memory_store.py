"""In-process student store keyed by id"""
import threading
from copy import deepcopy
from typing import Dict, Iterator, Optional
from students_service.repositories.store.base_store import StudentStore


class InMemoryStudentStore(StudentStore):
    """Dict-backed store; documents are copied in and out under a lock so no reader sees a half-written one."""

    def __init__(self):
        self._lock = threading.RLock()
        self._docs: Dict[int, Dict] = {}

    def get(self, student_id: int) -> Optional[Dict]:
        with self._lock:
            doc = self._docs.get(student_id)
            return deepcopy(doc) if doc is not None else None

    def insert_if_absent(self, doc: Dict) -> bool:
        with self._lock:
            if doc["id"] in self._docs:
                return False
            self._docs[doc["id"]] = deepcopy(doc)
            return True

    def put(self, doc: Dict) -> None:
        with self._lock:
            self._docs[doc["id"]] = deepcopy(doc)

    def append_mark(self, student_id: int, mark: Dict) -> Optional[Dict]:
        with self._lock:
            doc = self._docs.get(student_id)
            if doc is None:
                return None
            doc.setdefault("marks", []).append(deepcopy(mark))
            return deepcopy(doc)

    def set_phone(self, student_id: int, phone: str) -> Optional[Dict]:
        with self._lock:
            doc = self._docs.get(student_id)
            if doc is None:
                return None
            before = deepcopy(doc)
            doc["phone"] = phone
            return before

    def delete(self, student_id: int) -> Optional[Dict]:
        with self._lock:
            return self._docs.pop(student_id, None)

    def scan_all(self) -> Iterator[Dict]:
        # Ids are captured up front; each document is then read on its own
        with self._lock:
            ids = list(self._docs)
        for student_id in ids:
            doc = self.get(student_id)
            if doc is not None:
                yield doc

    def count(self) -> int:
        with self._lock:
            return len(self._docs)
