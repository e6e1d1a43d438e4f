"""Configuration settings - Configuration Layer (Environment Separated)"""
import os
from typing import Set
from dotenv import load_dotenv

load_dotenv()

def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)

def safe_str_env(key: str, default: str, allowed: Set[str] = None) -> str:
    """Read a string environment variable, falling back when not in the allowed set"""
    value = os.getenv(key, default).strip().lower()
    if allowed and value not in allowed:
        return default
    return value

# Scoring Configuration (Business Configuration)
EXCELLENT_SCORE = 80  # best students count marks strictly above this
DATE_FORMAT = "%Y-%m-%d"

# Ranking group keys
GROUP_BY_NAME = "name"
GROUP_BY_ID = "id"
ALLOWED_GROUP_KEYS: Set[str] = {GROUP_BY_NAME, GROUP_BY_ID}

# Store backends
MEMORY_BACKEND = "memory"
MONGO_BACKEND = "mongo"
ALLOWED_BACKENDS: Set[str] = {MEMORY_BACKEND, MONGO_BACKEND}

# Store Configuration
class StoreConfig:
    BACKEND = safe_str_env("STUDENTS_STORE_BACKEND", MEMORY_BACKEND, ALLOWED_BACKENDS)

# MongoDB Configuration
class MongoConfig:
    DB_URL = os.getenv("DB_URL", "mongodb://localhost:27017")
    DB_NAME = os.getenv("DB_NAME", "students_db")
    COLLECTION = os.getenv("STUDENTS_COLLECTION", "students")
    MAX_POOL_SIZE = safe_int_env("MONGO_MAX_POOL_SIZE", "50")
    TIMEOUT_MS = safe_int_env("MONGO_TIMEOUT_MS", "10000")

# Ranking Configuration
class RankingConfig:
    # "name" merges students sharing a name; "id" keeps them apart
    GROUP_KEY = safe_str_env("STUDENTS_RANKING_GROUP_KEY", GROUP_BY_NAME, ALLOWED_GROUP_KEYS)

# Logging Configuration
class LoggingConfig:
    LEVEL = os.getenv("STUDENTS_LOG_LEVEL", "INFO").upper()
    LOG_FILE = os.getenv("STUDENTS_LOG_FILE")
    MAX_LOG_SIZE = safe_int_env("STUDENTS_LOG_MAX_BYTES", str(10 * 1024 * 1024))
    BACKUP_COUNT = safe_int_env("STUDENTS_LOG_BACKUP_COUNT", "5")
