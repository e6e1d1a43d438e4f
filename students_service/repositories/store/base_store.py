"""Document store contract - Data Access Layer (SoC)"""
from abc import ABC, abstractmethod
from typing import Dict, Iterator, Optional


class StudentStore(ABC):
    """
    Capability the query engine and mutation coordinator rely on.

    Documents use the layout {"id", "name", "phone", "marks": [{"subject", "date", "score"}]}
    with `date` as a datetime.date. Every method is atomic for a single document,
    including the read-modify-write ones (append_mark, set_phone, delete), so any
    number of services or processes may share one store without losing writes.
    scan_all() is document-atomic but not a snapshot of the whole collection.
    Backend failures raise StoreUnavailableError and are never retried here.
    """

    @abstractmethod
    def get(self, student_id: int) -> Optional[Dict]:
        """Return a private copy of the document, or None"""

    @abstractmethod
    def insert_if_absent(self, doc: Dict) -> bool:
        """Insert doc unless its id exists; False when it already does"""

    @abstractmethod
    def put(self, doc: Dict) -> None:
        """Create or overwrite the whole document"""

    @abstractmethod
    def append_mark(self, student_id: int, mark: Dict) -> Optional[Dict]:
        """Append one mark; the document after the append, or None when absent"""

    @abstractmethod
    def set_phone(self, student_id: int, phone: str) -> Optional[Dict]:
        """Overwrite the phone; the document before the change, or None when absent"""

    @abstractmethod
    def delete(self, student_id: int) -> Optional[Dict]:
        """Remove the document with its embedded marks; the removed document, or None"""

    @abstractmethod
    def scan_all(self) -> Iterator[Dict]:
        """Yield a private copy of every document"""

    def count(self) -> int:
        return sum(1 for _ in self.scan_all())
