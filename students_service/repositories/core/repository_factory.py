"""Repository Factory - DRY Implementation"""
import logging
from students_service.config.settings import StoreConfig, MONGO_BACKEND
from students_service.repositories.store.base_store import StudentStore
from students_service.repositories.store.memory_store import InMemoryStudentStore
from students_service.repositories.store.mongo_store import MongoStudentStore
from students_service.repositories.student.student_repo import StudentRepo

logger = logging.getLogger(__name__)

class RepositoryFactory:
    """Centralized repository creation (DRY principle)"""

    _store: StudentStore = None
    _student_repo: StudentRepo = None

    @classmethod
    def get_store(cls) -> StudentStore:
        """Get the configured student store, created once per process"""
        if cls._store is None:
            if StoreConfig.BACKEND == MONGO_BACKEND:
                from students_service.students_central_db import get_collection
                store = MongoStudentStore(get_collection())
                store.ensure_indexes()
                cls._store = store
            else:
                cls._store = InMemoryStudentStore()
            logger.info(f"Using {StoreConfig.BACKEND} student store holding {cls._store.count()} students")
        return cls._store

    @classmethod
    def get_student_repo(cls) -> StudentRepo:
        """Get student repository instance with caching"""
        if cls._student_repo is None:
            cls._student_repo = StudentRepo(cls.get_store())
        return cls._student_repo

    @classmethod
    def reset(cls) -> None:
        cls._store = None
        cls._student_repo = None
