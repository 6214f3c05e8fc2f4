import os
from pathlib import Path

import pytest

os.environ["CHAT_TYPES_LOG_LEVEL"] = "DEBUG"

from chat_types.core.config import get_settings

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture()
def file_payload() -> dict:
    return {
        "authorId": "author-1",
        "fileName": "report.pdf",
        "id": "msg-1",
        "metadata": {"thread": "general", "pinned": False},
        "mimeType": "application/pdf",
        "size": 4096,
        "status": "delivered",
        "timestamp": 1700000000,
        "type": "file",
        "uri": "https://cdn.example.com/report.pdf",
    }


@pytest.fixture()
def image_payload() -> dict:
    return {
        "authorId": "author-1",
        "height": 480.0,
        "id": "msg-2",
        "imageName": "cat.png",
        "metadata": None,
        "size": 20480,
        "status": "read",
        "timestamp": 1700000100,
        "type": "image",
        "uri": "https://cdn.example.com/cat.png",
        "width": 640.0,
    }


@pytest.fixture()
def text_payload() -> dict:
    return {
        "authorId": "author-2",
        "id": "msg-3",
        "metadata": {"edited": True},
        "previewData": {
            "description": "An example page",
            "image": {"height": 90.0, "url": "https://example.com/og.png", "width": 160.0},
            "link": "https://example.com",
            "title": "Example",
        },
        "status": "sending",
        "text": "have a look at https://example.com",
        "timestamp": 1700000200,
        "type": "text",
    }


@pytest.fixture()
def audio_payload() -> dict:
    return {
        "authorId": "author-2",
        "id": "msg-4",
        "length": 1500,
        "metadata": None,
        "mimeType": "audio/ogg",
        "status": "error",
        "timestamp": 1700000300,
        "type": "audio",
        "uri": "file:///tmp/voice.ogg",
        "waveForm": [0.0, 42.5, 120.0],
    }


@pytest.fixture()
def video_payload() -> dict:
    return {
        "authorId": "author-3",
        "id": "msg-5",
        "length": 63000,
        "metadata": {"source": "camera"},
        "mimeType": "video/mp4",
        "status": None,
        "timestamp": None,
        "type": "video",
        "uri": "https://cdn.example.com/clip.mp4",
    }
