# env-driven settings, read once at import
import os
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent / "data"
BUNDLED_CATALOG_PATH = DATA_DIR / "exercises.json"
BUNDLED_EVAL_PATH = DATA_DIR / "eval_queries.jsonl"

CATALOG_PATH = os.getenv("TRAINLOG_CATALOG_PATH", str(BUNDLED_CATALOG_PATH))

DEFAULT_LIMIT = int(os.getenv("TRAINLOG_SEARCH_LIMIT", "20"))

# edit distance is O(n*m); only queries up to this many characters get the fuzzy tier
FUZZY_MAX_QUERY_LEN = int(os.getenv("TRAINLOG_FUZZY_MAX_QUERY_LEN", "6"))

LOG_LEVEL = os.getenv("TRAINLOG_LOG_LEVEL", "INFO")

API_URL = os.getenv("TRAINLOG_API_URL", "http://127.0.0.1:8000")
