"""
Test configuration and fixtures
"""

import pytest
from fastapi.testclient import TestClient

from emoji_search.api.deps import get_search_dataset
from emoji_search.data import reset_dataset, set_dataset
from emoji_search.engine.core.dataset import EmojiDataset
from emoji_search.models import Options

# Insertion order matters: ties in ranking keep dataset order
SAMPLE_EMOJI_KEYWORDS = {
    "😀": ["grinning face", "smile", "happy"],
    "😊": ["smiling face with smiling eyes", "smile", "happy", "blush"],
    "😢": ["crying face", "cry", "sad", "tear"],
    "👋": ["waving hand", "hello", "wave"],
    "🌊": ["water wave", "wave", "ocean"],
    "🫂": ["people hugging", "hug", "hello"],
    "🐶": ["dog face", "dog", "pet"],
    "🐕": ["dog", "pet", "animal"],
    "😎": ["smiling face with sunglasses", "cool", "sunglasses"],
}

SAMPLE_PREFERRED = {
    "smile": "😊",
    "happy": "😀",
    "wave": "🌊",
    "dog": "🐶",
    "hello": "👋",
    "hug": "🫂",
}

SAMPLE_TOP_WORDS = ["the", "hello", "happy", "water", "dog", "smile"]


@pytest.fixture(autouse=True)
def clean_dataset():
    """Make sure no process-wide dataset leaks between tests"""
    reset_dataset()
    yield
    reset_dataset()


@pytest.fixture
def dataset():
    """Small in-memory emoji dataset"""
    return EmojiDataset.from_mappings(
        SAMPLE_EMOJI_KEYWORDS,
        SAMPLE_PREFERRED,
        SAMPLE_TOP_WORDS,
        glossary={"hello": ["👋", "🫂"]},
    )


@pytest.fixture
def options():
    """Empty per-request options"""
    return Options()


@pytest.fixture
def client(dataset):
    """Create a test client with dataset dependency override"""
    from emoji_search.server import app

    # Installed before startup so the lifespan finds it and skips loading files
    set_dataset(dataset)
    app.dependency_overrides[get_search_dataset] = lambda: dataset
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def write_dataset_files(tmp_path):
    """Write dataset JSON files into a temporary directory"""
    import json

    def _write(
        keywords=SAMPLE_EMOJI_KEYWORDS,
        preferred=SAMPLE_PREFERRED,
        top_words=SAMPLE_TOP_WORDS,
        glossary=None,
    ):
        files = {
            "emoogle-emoji-keywords.json": keywords,
            "emoogle-keyword-most-relevant-emoji.json": preferred,
            "top-1000-words-by-frequency.json": top_words,
        }
        if glossary is not None:
            files["emoogle-emoji-glossary.json"] = glossary
        for name, content in files.items():
            if content is not None:
                (tmp_path / name).write_text(json.dumps(content), encoding="utf-8")
        return tmp_path

    return _write
