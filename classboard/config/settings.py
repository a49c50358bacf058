"""Configuration settings - Configuration Layer (Environment Separated)"""
import os
from typing import List, Set

from dotenv import load_dotenv

load_dotenv()

def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)

def safe_float_env(key: str, default: str) -> float:
    """Safely convert environment variable to float"""
    try:
        return float(os.getenv(key, default))
    except ValueError:
        return float(default)

def list_env(key: str, default: str) -> List[str]:
    """Comma separated environment variable as a list"""
    raw = os.getenv(key, default)
    return [item.strip() for item in raw.split(",") if item.strip()]

# Event categories (Business Configuration)
EVENT_CATEGORIES: List[str] = [
    "homework",
    "quiz",
    "assignment",
    "participation",
    "individual-noncurricular",
    "team-noncurricular",
]

# Older entry screens stored the short names
CATEGORY_ALIASES = {
    "noncurr-individual": "individual-noncurricular",
    "noncurr-team": "team-noncurricular",
}

# Submission statuses
STATUS_COMPLETED = "completed"
STATUS_INCOMPLETE = "incomplete"
STATUS_ABSENT = "absent"
STATUS_PENDING = "pending"
SUBMISSION_STATUSES: Set[str] = {STATUS_COMPLETED, STATUS_INCOMPLETE, STATUS_ABSENT, STATUS_PENDING}
STATUS_ALIASES = {"pending-approval": STATUS_PENDING}

# Roles carried in the JWT "userType" claim
ROLE_STUDENT = "student"
ROLE_TEACHER = "teacher"
ROLE_ADMIN = "admin"
ROLE_MAIN_ADMIN = "main-admin"

# Scoring Configuration
CLASS_DAY_BONUS = safe_int_env("CLASS_DAY_BONUS", "10")
WEEK_LENGTH_DAYS = safe_int_env("WEEK_LENGTH_DAYS", "5")
QUIZ_SCORE_MIN = 0
QUIZ_SCORE_MAX = 100

# Classes shown on the leaderboard when none are requested
CLASS_OPTIONS: List[str] = list_env("CLASS_OPTIONS", "class-10-A,class-10-B,class-9-A,class-9-B")

SCHOOL_TIMEZONE = os.getenv("SCHOOL_TIMEZONE", "Asia/Kolkata")

# Database Configuration
class DatabaseConfig:
    DB_URL = os.getenv("DB_URL", "mongodb://localhost:27017")
    DB_NAME = os.getenv("DB_NAME", "classboard")
    CONNECT_TIMEOUT_MS = safe_int_env("DB_CONNECT_TIMEOUT_MS", "10000")
    SERVER_SELECTION_TIMEOUT_MS = safe_int_env("DB_SERVER_SELECTION_TIMEOUT_MS", "5000")
    SOCKET_TIMEOUT_MS = safe_int_env("DB_SOCKET_TIMEOUT_MS", "30000")

# Leaderboard Configuration
class LeaderboardConfig:
    MAX_WORKERS = safe_int_env("LEADERBOARD_MAX_WORKERS", "4")
    CLASS_TIMEOUT = safe_float_env("LEADERBOARD_CLASS_TIMEOUT", "20")
    DEFAULT_TOP_PERFORMERS = safe_int_env("LEADERBOARD_TOP_PERFORMERS", "3")

# Cache Configuration
class CacheConfig:
    LEADERBOARD_CACHE_TTL = safe_int_env("LEADERBOARD_CACHE_TTL", "60")
    LEADERBOARD_CACHE_SIZE = safe_int_env("LEADERBOARD_CACHE_SIZE", "256")

# Security Configuration
class SecurityConfig:
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me")
    JWT_ACCESS_TOKEN_MINUTES = safe_int_env("JWT_ACCESS_TOKEN_MINUTES", "60")

# Logging Configuration
class LoggingConfig:
    LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.getcwd(), "logs"))
    LOG_FILE_NAME = "classboard.log"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
    BACKUP_COUNT = 5
