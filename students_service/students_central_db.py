import threading
from pymongo import MongoClient
from students_service.config.settings import MongoConfig

# MongoDB connection configuration
MONGO_CLIENT_CONFIG = {
    'maxPoolSize': MongoConfig.MAX_POOL_SIZE,
    'connectTimeoutMS': MongoConfig.TIMEOUT_MS,
    'serverSelectionTimeoutMS': MongoConfig.TIMEOUT_MS,
    'socketTimeoutMS': MongoConfig.TIMEOUT_MS * 6,
    'retryWrites': False,  # appends are not idempotent
    'w': 'majority'
}

_client = None
_client_lock = threading.Lock()

def get_mongo_client() -> MongoClient:
    """Get the shared MongoDB client with connection pooling, created on first use."""
    global _client
    with _client_lock:
        if _client is None:
            _client = MongoClient(MongoConfig.DB_URL, **MONGO_CLIENT_CONFIG)
        return _client

def get_db():
    """Get MongoDB database."""
    return get_mongo_client()[MongoConfig.DB_NAME]

def get_collection(name: str = None):
    """Get collection from database, the students collection by default."""
    return get_db()[name or MongoConfig.COLLECTION]

def close_client() -> None:
    """Close the shared client if one was created; a no-op otherwise."""
    global _client
    with _client_lock:
        if _client is not None:
            _client.close()
            _client = None
