from datetime import date

import pytest

from students_service.models.student import Mark, Student
from students_service.repositories.store.memory_store import InMemoryStudentStore
from students_service.repositories.student.student_repo import StudentRepo
from students_service.services.students_service import StudentsService

JAVA = "Java"
CPP = "C++"
JS = "JavaScript"


def _students():
    return [
        Student(1, "Yosef", "051-1234567", [
            Mark(JAVA, date(2023, 1, 10), 80),
            Mark(JAVA, date(2023, 2, 10), 90),
            Mark(CPP, date(2023, 3, 10), 60),
        ]),
        Student(2, "Vasya", "052-1234567"),
        Student(3, "Sara", "053-1234567", [
            Mark(JAVA, date(2023, 1, 10), 30),
            Mark(CPP, date(2023, 1, 15), 40),
        ]),
        Student(4, "David", "054-1234567", [
            Mark(CPP, date(2023, 1, 20), 70),
            Mark(JS, date(2023, 2, 20), 85),
            Mark(CPP, date(2023, 3, 20), 95),
        ]),
        Student(5, "Olya", "055-1234567", [
            Mark(JAVA, date(2023, 1, 5), 75),
            Mark(CPP, date(2023, 2, 5), 65),
        ]),
        Student(6, "Rivka", "056-1234567", [
            Mark(JAVA, date(2023, 1, 25), 90),
            Mark(JAVA, date(2023, 2, 25), 100),
            Mark(CPP, date(2023, 3, 25), 82),
        ]),
        Student(7, "Moshe", "057-1234567", [
            Mark(CPP, date(2023, 4, 1), 50),
        ]),
    ]


@pytest.fixture
def students():
    """Fixture collection: 1 mixed, 2 no marks, 3 low scores, 4 and 6 all >= 70, 7 one mark."""
    return _students()


@pytest.fixture
def store(students):
    store = InMemoryStudentStore()
    for student in students:
        store.put(student.to_document())
    return store


@pytest.fixture
def repo(store):
    return StudentRepo(store)


@pytest.fixture
def service(repo):
    return StudentsService(repo)


@pytest.fixture
def empty_service():
    return StudentsService(StudentRepo(InMemoryStudentStore()))
