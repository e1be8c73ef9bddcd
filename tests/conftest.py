from unittest.mock import AsyncMock

import pytest

from yt_catalog.config import Settings

CHANNEL_ID = "UC1234567890abcdefghijkl"


def make_video(video_id, duration, title=None, thumbnail=None):
    """Item no formato de `videos.list` (part=contentDetails,snippet)."""
    return {
        "kind": "youtube#video",
        "id": video_id,
        "contentDetails": {"duration": duration},
        "snippet": {
            "title": title or f"Video {video_id}",
            "thumbnails": {
                "default": {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg"},
                "medium": {"url": thumbnail or f"https://i.ytimg.com/vi/{video_id}/mqdefault.jpg"},
            },
        },
    }


def make_playlist_page(video_ids, next_page_token=None):
    """Página de `playlistItems.list` (part=snippet)."""
    page = {
        "kind": "youtube#playlistItemListResponse",
        "items": [
            {"snippet": {"resourceId": {"kind": "youtube#video", "videoId": vid}}}
            for vid in video_ids
        ],
    }
    if next_page_token:
        page["nextPageToken"] = next_page_token
    return page


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / "public" / "youtube-data.json"


@pytest.fixture
def settings(output_file):
    return Settings(api_key="test-key", channel_id=CHANNEL_ID, output_file=str(output_file))


@pytest.fixture
def mock_http(mocker):
    """Substitui o GET da API; configure `side_effect` com as respostas em ordem."""
    return mocker.patch("yt_catalog.youtube_api.http_get_json", new_callable=AsyncMock)


class FakeResponse:
    """Resposta mínima de `aiohttp` (usada como `async with`)."""

    def __init__(self, status=200, payload=None, reason="OK"):
        self.status = status
        self.reason = reason
        self._payload = payload

    async def json(self, content_type="application/json"):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    """Devolve as respostas em ordem, registrando (url, params) de cada GET."""

    def __init__(self, *responses, error=None):
        self.responses = list(responses)
        self.error = error
        self.calls = []

    def get(self, url, params=None):
        self.calls.append((url, params))
        if self.error:
            raise self.error
        return self.responses.pop(0)
