"""Student Repository - Data Access Layer (SoC)"""
from typing import Dict, Iterable, List, Optional
from students_service.pipeline.stages import Stage, run_pipeline
from students_service.repositories.store.base_store import StudentStore

class StudentRepo:
    def __init__(self, store: StudentStore):
        self.store = store

    def find_by_id(self, student_id: int) -> Optional[Dict]:
        return self.store.get(student_id)

    def insert(self, doc: Dict) -> bool:
        """Insert unless the id is taken"""
        return self.store.insert_if_absent(doc)

    def push_mark(self, student_id: int, mark: Dict) -> Optional[Dict]:
        """Atomic append; the updated document, or None when the student does not exist"""
        return self.store.append_mark(student_id, mark)

    def set_phone(self, student_id: int, phone: str) -> Optional[Dict]:
        """Atomic phone overwrite; the document as it was before, or None"""
        return self.store.set_phone(student_id, phone)

    def delete_by_id(self, student_id: int) -> Optional[Dict]:
        return self.store.delete(student_id)

    def aggregate(self, pipeline: List[Stage]) -> List[Dict]:
        """Run a pipeline over a document-atomic scan of the whole collection"""
        return run_pipeline(self.store.scan_all(), pipeline)

    def aggregate_student(self, student_id: int, pipeline: List[Stage]) -> Optional[List[Dict]]:
        """Run a pipeline over one student's document; None when the student does not exist"""
        doc = self.store.get(student_id)
        if doc is None:
            return None
        return run_pipeline(_single(doc), pipeline)

def _single(doc: Dict) -> Iterable[Dict]:
    yield doc
