import pytest

from echo_lens import db
from echo_lens.models import ArticleInput, ArticleMetadata

# No dictionary phrases, framing patterns or lexicon words.
FILLER = (
    "The committee met on Tuesday afternoon to review the quarterly budget figures "
    "and scheduled a follow-up session for next month. "
)


def make_article(text: str = FILLER, domain: str = "", title: str = "", url: str = "") -> ArticleInput:
    return ArticleInput(text=text, metadata=ArticleMetadata(title=title, domain=domain, url=url))


@pytest.fixture
def temp_db(tmp_path, monkeypatch):
    monkeypatch.setattr(db, "DATA_DIR", tmp_path)
    monkeypatch.setattr(db, "DB_PATH", tmp_path / "test.db")
    db.init_db()
    return tmp_path / "test.db"
