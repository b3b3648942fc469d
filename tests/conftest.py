"""Shared fixtures for tvpromo tests."""

from unittest.mock import MagicMock

import pytest

from tvpromo import VideoMetadata


def make_response(status_code=200, payload=None, text=""):
    """Build a fake requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    resp.json.return_value = payload if payload is not None else {}
    return resp


def snippet_payload(title, description="A deep dive."):
    """videos.list body with a single item."""
    return {
        "kind": "youtube#videoListResponse",
        "items": [
            {
                "kind": "youtube#video",
                "id": "abc123",
                "snippet": {"title": title, "description": description},
            }
        ],
    }


@pytest.fixture
def tf_metadata() -> VideoMetadata:
    return VideoMetadata(title="Episode 101: Databases Explained", description="A deep dive.")


@pytest.fixture
def gcast_metadata() -> VideoMetadata:
    return VideoMetadata(title="GCast 7: Another Title", description="Screencast walkthrough.")


@pytest.fixture
def fetcher_for():
    """Return a factory making fetch callables that record the ids they were asked for."""
    def _factory(meta):
        calls = []

        def fetch(video_id):
            calls.append(video_id)
            return meta

        fetch.calls = calls
        return fetch
    return _factory


@pytest.fixture
def output_dir(tmp_path):
    d = tmp_path / "posts"
    d.mkdir()
    return d
