"""Tests for settings helpers, logging setup, the repository factory and the entry point."""

import logging
from unittest.mock import MagicMock

import pytest
from pymongo import ASCENDING

from students_service import app as app_module
from students_service import students_central_db
from students_service.config import log_config
from students_service.config.settings import (
    ALLOWED_GROUP_KEYS, GROUP_BY_NAME, StoreConfig, safe_int_env, safe_str_env,
)
from students_service.repositories.core.repository_factory import RepositoryFactory
from students_service.repositories.store.memory_store import InMemoryStudentStore
from students_service.repositories.store.mongo_store import MongoStudentStore


class TestEnvHelpers:
    def test_int_fallback_on_garbage(self, monkeypatch):
        monkeypatch.setenv("STUDENTS_TEST_INT", "abc")
        assert safe_int_env("STUDENTS_TEST_INT", "7") == 7

    def test_int_from_env(self, monkeypatch):
        monkeypatch.setenv("STUDENTS_TEST_INT", "12")
        assert safe_int_env("STUDENTS_TEST_INT", "7") == 12

    def test_str_outside_allowed_falls_back(self, monkeypatch):
        monkeypatch.setenv("STUDENTS_TEST_KEY", "phone")
        assert safe_str_env("STUDENTS_TEST_KEY", GROUP_BY_NAME, ALLOWED_GROUP_KEYS) == GROUP_BY_NAME

    def test_str_is_normalized(self, monkeypatch):
        monkeypatch.setenv("STUDENTS_TEST_KEY", " ID ")
        assert safe_str_env("STUDENTS_TEST_KEY", GROUP_BY_NAME, ALLOWED_GROUP_KEYS) == "id"


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def clean_logger(self):
        logger = logging.getLogger(log_config.ROOT_LOGGER_NAME)
        saved = list(logger.handlers), list(logger.filters)
        logger.handlers.clear()
        logger.filters.clear()
        yield logger
        logger.handlers[:], logger.filters[:] = saved

    def test_configures_once(self):
        logger = log_config.setup_logging("DEBUG")
        log_config.setup_logging("DEBUG")
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_file_handler(self, tmp_path):
        logger = log_config.setup_logging("INFO", str(tmp_path / "students.log"))
        assert len(logger.handlers) == 2

    def test_duplicate_filter(self):
        dup = log_config.DuplicateFilter()
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "same", None, None)
        assert dup.filter(record)
        assert not dup.filter(record)


class TestRepositoryFactory:
    @pytest.fixture(autouse=True)
    def reset(self, monkeypatch):
        monkeypatch.setattr(StoreConfig, "BACKEND", "memory")
        RepositoryFactory.reset()
        yield
        RepositoryFactory.reset()

    def test_memory_backend(self):
        assert isinstance(RepositoryFactory.get_store(), InMemoryStudentStore)

    def test_repo_is_cached(self):
        assert RepositoryFactory.get_student_repo() is RepositoryFactory.get_student_repo()

    def test_reset_creates_new_store(self):
        first = RepositoryFactory.get_store()
        RepositoryFactory.reset()
        assert RepositoryFactory.get_store() is not first

    def test_mongo_backend_ensures_phone_index(self, monkeypatch):
        collection = MagicMock()
        monkeypatch.setattr(StoreConfig, "BACKEND", "mongo")
        monkeypatch.setattr(students_central_db, "get_collection", lambda: collection)
        store = RepositoryFactory.get_store()
        assert isinstance(store, MongoStudentStore)
        collection.create_index.assert_called_once_with([("phone", ASCENDING)], name="phone_1")


def test_main_closes_mongo_client(monkeypatch):
    app = MagicMock()
    app.run.side_effect = KeyboardInterrupt
    closed = []
    monkeypatch.setattr(app_module, "create_app", lambda: app)
    monkeypatch.setattr(app_module, "close_client", lambda: closed.append(True))
    with pytest.raises(KeyboardInterrupt):
        app_module.main()
    assert closed == [True]
