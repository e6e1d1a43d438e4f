"""Student store adapters - in-memory and MongoDB"""
from .base_store import StudentStore
from .memory_store import InMemoryStudentStore
from .mongo_store import MongoStudentStore

__all__ = [
    'StudentStore',
    'InMemoryStudentStore',
    'MongoStudentStore'
]
