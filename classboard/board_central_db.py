from pymongo import MongoClient

from classboard.config.settings import DatabaseConfig

# MongoDB connection configuration
MONGO_CLIENT_CONFIG = {
    'maxPoolSize': 50,
    'minPoolSize': 0,
    'connectTimeoutMS': DatabaseConfig.CONNECT_TIMEOUT_MS,
    'serverSelectionTimeoutMS': DatabaseConfig.SERVER_SELECTION_TIMEOUT_MS,
    'socketTimeoutMS': DatabaseConfig.SOCKET_TIMEOUT_MS,
    'retryWrites': True,
    'retryReads': True,
    'connect': False,
    'w': 1
}

def get_mongo_client():
    """Get a MongoDB client with connection pooling."""
    return MongoClient(DatabaseConfig.DB_URL, **MONGO_CLIENT_CONFIG)


# Single client for the process; it connects on first use
client = get_mongo_client()
db = client[DatabaseConfig.DB_NAME]

# Collection definitions
COLLECTIONS = {
    'users_collection': 'users',
    'submissions_collection': 'submissions',
}

users_collection = db[COLLECTIONS['users_collection']]
submissions_collection = db[COLLECTIONS['submissions_collection']]
