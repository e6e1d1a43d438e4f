"""Student / Mark domain models and their document mapping"""
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, NamedTuple
from students_service.utils.time.timeutils import parse_date


@dataclass(frozen=True)
class Mark:
    """A single test result; never edited once recorded."""
    subject: str
    date: date
    score: int

    def __post_init__(self):
        if not isinstance(self.subject, str) or not self.subject:
            raise ValueError("Mark subject must be a non-empty string")
        # datetimes and ISO strings collapse to calendar dates
        object.__setattr__(self, "date", parse_date(self.date))

    def to_document(self) -> Dict:
        return {"subject": self.subject, "date": self.date, "score": self.score}

    @classmethod
    def from_document(cls, doc: Dict) -> "Mark":
        return cls(subject=doc["subject"], date=parse_date(doc["date"]), score=int(doc["score"]))


class StudentInfo(NamedTuple):
    """Lightweight projection returned by student queries"""
    id: int
    name: str
    phone: str


class NameAvgScore(NamedTuple):
    name: str
    avg_score: int


@dataclass
class Student:
    """Student document: identity, contact info and embedded marks in insertion order."""
    id: int
    name: str
    phone: str
    marks: List[Mark] = field(default_factory=list)

    def projection(self) -> StudentInfo:
        return StudentInfo(self.id, self.name, self.phone)

    def to_document(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "marks": [mark.to_document() for mark in self.marks]
        }

    @classmethod
    def from_document(cls, doc: Dict) -> "Student":
        return cls(
            id=doc["id"],
            name=doc["name"],
            phone=doc["phone"],
            marks=[Mark.from_document(m) for m in doc.get("marks") or []]
        )


def info_from_row(row: Dict) -> StudentInfo:
    """Build the id/name/phone projection from a pipeline row"""
    return StudentInfo(row["id"], row["name"], row["phone"])
