"""Tests for the remote scoreboard mirror."""

import json

import httpx
import pytest

from loopx.errors import MirrorError
from loopx.models import MirrorFields
from loopx.storage import HttpMirror, NullMirror

BASE_URL = "https://scores.example/api/"


def _fields():
    return MirrorFields(score=10, last_challenge="trivia", completed=["typing"])


def _mirror(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpMirror(BASE_URL, client=client)


class TestHttpMirror:
    """Test requests sent by HttpMirror."""

    async def test_upsert(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={})

        mirror = _mirror(handler)
        await mirror.upsert("Alex Doe", _fields())

        request = seen[0]
        assert request.method == "PATCH"
        assert request.url.path == "/api/scores/Alex Doe"
        assert json.loads(request.content) == {
            "score": 10,
            "lastChallenge": "trivia",
            "completedChallenges": ["typing"],
        }

    async def test_create_includes_name(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(201)

        mirror = _mirror(handler)
        await mirror.create("Alex", _fields())

        assert seen[0].method == "PUT"
        assert json.loads(seen[0].content)["name"] == "Alex"

    async def test_error_status_raises(self):
        mirror = _mirror(lambda request: httpx.Response(503))
        with pytest.raises(MirrorError):
            await mirror.upsert("Alex", _fields())

    async def test_transport_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        mirror = _mirror(handler)
        with pytest.raises(MirrorError):
            await mirror.upsert("Alex", _fields())

    async def test_leaderboard_sorted(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(
                200,
                json=[
                    {"name": "Sam", "score": 5},
                    {"name": "Alex", "score": 9},
                    {"name": "Kim"},
                ],
            )

        mirror = _mirror(handler)
        scores = await mirror.leaderboard(limit=2)

        assert seen[0].url.params["limit"] == "2"
        assert [s.name for s in scores] == ["Alex", "Sam"]
        assert scores[0].score == 9

    async def test_leaderboard_items_envelope(self):
        mirror = _mirror(
            lambda request: httpx.Response(200, json={"items": [{"name": "Alex", "score": 3}]})
        )
        scores = await mirror.leaderboard()
        assert scores[0].name == "Alex"

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="<html>oops</html>"),
            httpx.Response(200, json=[{"score": 3}]),
            httpx.Response(200, json=[{"name": "Alex", "score": "lots"}]),
            httpx.Response(200, json=["Alex"]),
        ],
    )
    async def test_leaderboard_malformed_body_raises(self, response):
        mirror = _mirror(lambda request: response)
        with pytest.raises(MirrorError):
            await mirror.leaderboard()

    async def test_close_keeps_injected_client(self):
        client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        mirror = HttpMirror(BASE_URL, client=client)
        await mirror.close()
        assert not client.is_closed
        await client.aclose()


class TestNullMirror:
    """Test the disabled mirror."""

    async def test_noops(self):
        mirror = NullMirror()
        assert not mirror.enabled
        await mirror.create("Alex", _fields())
        await mirror.upsert("Alex", _fields())
        assert await mirror.leaderboard() == []
