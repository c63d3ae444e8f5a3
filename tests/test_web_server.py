import pytest

from fastapi.testclient import TestClient

from spriteframes.web import server
from spriteframes.web.server import SequenceRequest


def test_sequence_request_accepts_camel_and_snake_case():
    camel = SequenceRequest.model_validate({"framePath": "a/f_01.png", "frameCount": 3, "includeFrames": True})
    snake = SequenceRequest.model_validate({"frame_path": "a/f_01.png", "frame_count": 3})
    assert camel.frame_path == snake.frame_path == "a/f_01.png"
    assert camel.include_frames is True
    assert snake.include_frames is False


def test_sequence_request_defaults_missing_fields():
    req = SequenceRequest.model_validate({"framePath": None})
    assert req.frame_path == ""
    assert req.frame_count is None


def test_health():
    client = TestClient(server.create_app())
    assert client.get("/health").json() == {"status": "ok"}


def test_parse_sequence_returns_pattern():
    client = TestClient(server.create_app())
    response = client.post("/api/sequence", json={"framePath": "assets/frame_001.jpg", "frameCount": 10})
    assert response.status_code == 200
    body = response.json()
    assert body["basePath"] == "assets/"
    assert body["sequenceStart"] == 1
    assert body["padWidth"] == 3
    assert body["fileName"] == "frame_001.jpg"
    assert body["frames"] is None


def test_parse_sequence_lists_frames_up_to_cap(monkeypatch):
    monkeypatch.setattr(server, "MAX_LISTED_FRAMES", 2)
    client = TestClient(server.create_app())
    response = client.post(
        "/api/sequence",
        json={"framePath": "f_01.png", "frameCount": 5, "includeFrames": True},
    )
    body = response.json()
    assert body["frames"] == ["/f_01.png", "/f_02.png"]
    assert body["truncated"] is True


def test_parse_sequence_rejects_bad_configuration():
    client = TestClient(server.create_app())
    response = client.post("/api/sequence", json={"framePath": "img/shot_05.gif", "frameCount": 3})
    assert response.status_code == 400
    assert "gif" in response.json()["detail"]

    response = client.post("/api/sequence", json={"framePath": "", "frameCount": 4})
    assert response.status_code == 400
    assert response.json()["detail"] == "Frame path is not defined"


@pytest.mark.parametrize("count", [True, "10", 2.0, -1])
def test_parse_sequence_rejects_invalid_counts(count):
    client = TestClient(server.create_app())
    response = client.post("/api/sequence", json={"framePath": "f_01.png", "frameCount": count})
    assert response.status_code == 400
    assert "Frame count must be" in response.json()["detail"]


def test_parse_sequence_rejects_insufficient_padding():
    client = TestClient(server.create_app())
    response = client.post("/api/sequence", json={"framePath": "img/shot_05.jpg", "frameCount": 200})
    assert response.status_code == 400
    assert "Leading zeros" in response.json()["detail"]


def test_parse_sequence_rejects_non_string_path():
    client = TestClient(server.create_app())
    response = client.post("/api/sequence", json={"framePath": 123, "frameCount": 3})
    assert response.status_code == 400
    assert "must be a string" in response.json()["detail"]
