import pytest
from pydantic import ValidationError

from recommendation_api.app.schemas.recommendation import (
    RecommendationCreate,
    RecommendationRead,
    is_youtube_link,
)


@pytest.mark.parametrize(
    "link",
    [
        "https://www.youtube.com/watch?v=5NV6Rdv1a3I",
        "http://youtube.com/watch?v=LIz_gfv6lxM",
        "https://m.youtube.com/watch?v=abc-123",
        "https://www.youtube.com/watch?list=PL1&v=abc&t=42s",
        "https://youtu.be/chwyjJbcs1Y",
        "HTTPS://WWW.YOUTUBE.COM/watch?v=abc",
    ],
)
def test_accepts_youtube_video_links(link):
    assert is_youtube_link(link)


@pytest.mark.parametrize(
    "link",
    [
        "https://www.google.com",
        "http://www.youtube.com",
        "https://www.youtube.com/watch",
        "https://www.youtube.com/watch?list=PL1",
        "https://vimeo.com/watch?v=abc",
        "www.youtube.com/watch?v=abc",
        "https://www.youtube.com.evil.example/watch?v=abc",
        "",
    ],
)
def test_rejects_other_links(link):
    assert not is_youtube_link(link)


def test_create_strips_name():
    data = RecommendationCreate(name="  alice  ", youtubeLink="https://youtu.be/abc")
    assert data.name == "alice"
    assert data.youtube_link == "https://youtu.be/abc"


def test_create_accepts_field_name():
    data = RecommendationCreate(name="alice", youtube_link="https://youtu.be/abc")
    assert data.youtube_link == "https://youtu.be/abc"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"name": "alice"},
        {"youtubeLink": "https://youtu.be/abc"},
        {"name": 123456, "youtubeLink": "https://youtu.be/abc"},
        {"name": "", "youtubeLink": "https://youtu.be/abc"},
        {"name": "alice", "youtubeLink": 42},
        {"name": "alice", "youtubeLink": "https://www.google.com"},
    ],
)
def test_create_rejects_bad_payloads(payload):
    with pytest.raises(ValidationError):
        RecommendationCreate(**payload)


def test_read_serialises_wire_names():
    rec = RecommendationRead(id=1, name="alice", youtube_link="https://youtu.be/abc", score=3)
    assert rec.model_dump(by_alias=True) == {
        "id": 1,
        "name": "alice",
        "youtubeLink": "https://youtu.be/abc",
        "score": 3,
    }
