"""
Crime 360 engine configuration.
Values are read from the environment (and an optional .env file) once at import time.
"""

import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

# Debug flag is also exposed as a function to stay dynamic in tests
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

# Seed data: built-in datasets unless a JSON file with the same shape is given
SEED_DATA_PATH = os.getenv("SEED_DATA_PATH")

# Incident search paging
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", "100"))

# Facial similarity search
FACE_MATCH_THRESHOLD = float(os.getenv("FACE_MATCH_THRESHOLD", "0.8"))
FACE_FEATURE_DIMENSION = int(os.getenv("FACE_FEATURE_DIMENSION", "128"))

# Dashboards served from these origins may call the API
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")

# Version string
VERSION = "1.0.0"


def debug_enabled():
    """Check if debug mode is enabled."""
    return os.getenv("DEBUG", "false").lower() == "true"


def get_seed_data_path() -> Optional[str]:
    """Path of the JSON seed file, or None for the built-in datasets."""
    return os.getenv("SEED_DATA_PATH", SEED_DATA_PATH) or None


def get_default_page_size() -> int:
    """Get the page size used when a query does not name one."""
    return DEFAULT_PAGE_SIZE


def get_face_match_threshold() -> float:
    """Get the similarity threshold used when a face search does not name one."""
    return FACE_MATCH_THRESHOLD


def get_cors_origins() -> List[str]:
    """Get the list of allowed dashboard origins."""
    return [o.strip() for o in CORS_ORIGINS.split(",") if o.strip()]


def validate_config():
    """Validate engine configuration and return any issues."""
    issues = []

    if DEFAULT_PAGE_SIZE < 1:
        issues.append("DEFAULT_PAGE_SIZE must be >= 1")

    if MAX_PAGE_SIZE < DEFAULT_PAGE_SIZE:
        issues.append("MAX_PAGE_SIZE must be >= DEFAULT_PAGE_SIZE")

    if not 0.0 <= FACE_MATCH_THRESHOLD <= 1.0:
        issues.append(f"Invalid FACE_MATCH_THRESHOLD: {FACE_MATCH_THRESHOLD}")

    if FACE_FEATURE_DIMENSION < 1:
        issues.append("FACE_FEATURE_DIMENSION must be >= 1")

    seed_path = get_seed_data_path()
    if seed_path and not os.path.isfile(seed_path):
        issues.append(f"SEED_DATA_PATH does not exist: {seed_path}")

    return issues
