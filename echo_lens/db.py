import json
import logging
import sqlite3
import time
from urllib.parse import urlparse

from echo_lens.config import CACHE_EXPIRY_DAYS, DATA_DIR, DB_PATH

log = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS analyses (
    cache_key TEXT PRIMARY KEY,
    url TEXT,
    payload TEXT,
    created_at REAL
);
"""

CACHE_EXPIRY_SECONDS = CACHE_EXPIRY_DAYS * 24 * 60 * 60


def get_conn() -> sqlite3.Connection:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(DB_PATH)
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def init_db():
    conn = get_conn()
    conn.executescript(SCHEMA)
    conn.close()


def cache_key(url: str) -> str:
    """Scheme, host and path only; query strings and fragments are ignored."""
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        return url
    return f"{parsed.scheme}://{parsed.netloc}{parsed.path}"


def get_cached_analysis(url: str, now: float | None = None) -> dict | None:
    now = time.time() if now is None else now
    key = cache_key(url)
    conn = get_conn()
    row = conn.execute("SELECT payload, created_at FROM analyses WHERE cache_key = ?", (key,)).fetchone()
    if row is None:
        conn.close()
        return None

    payload, created_at = row
    if now - created_at > CACHE_EXPIRY_SECONDS:
        log.info("Cached analysis for %s expired", key)
        conn.execute("DELETE FROM analyses WHERE cache_key = ?", (key,))
        conn.commit()
        conn.close()
        return None
    conn.close()

    try:
        return json.loads(payload)
    except json.JSONDecodeError:
        log.warning("Corrupt cache entry for %s", key)
        return None


def save_analysis(url: str, analysis: dict, now: float | None = None):
    now = time.time() if now is None else now
    conn = get_conn()
    conn.execute(
        "INSERT OR REPLACE INTO analyses (cache_key, url, payload, created_at) VALUES (?, ?, ?, ?)",
        (cache_key(url), url, json.dumps(analysis), now),
    )
    conn.commit()
    conn.close()


def clear_cache() -> int:
    conn = get_conn()
    removed = conn.execute("DELETE FROM analyses").rowcount
    conn.commit()
    conn.close()
    return removed
