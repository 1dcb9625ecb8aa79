from pathlib import Path
from dotenv import load_dotenv
import os

load_dotenv()

# API keys
OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY", "")

# Paths
ROOT_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = ROOT_DIR / "data"
DB_PATH = DATA_DIR / "echo_lens.db"

# Analysis constants
MIN_TEXT_LENGTH = 100  # below this, text-based vectors abstain

# External tone lookup
GDELT_DOC_URL = "https://api.gdeltproject.org/api/v2/doc/doc"
TONE_MAX_RECORDS = 10
TONE_QUERY_DELAY = 1.0  # seconds between candidate queries

# Summaries
SUMMARY_MODEL = "gpt-4o-mini"
SUMMARY_MAX_CHARS = 4000

# Cache
CACHE_EXPIRY_DAYS = 7
