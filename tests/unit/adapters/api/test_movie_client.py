"""
Tests for MovieAPIClient - HTTP client of the movies API.

Uses respx to mock httpx calls and verifies:
- JSON payloads are decoded into Movie entities
- create() never sends an id
- 404 responses become NotFoundError
- other failures propagate without retry
"""

import json
from decimal import Decimal

import httpx
import pytest
import respx

from mymovies.adapters.api.movie_client import MovieAPIClient, decode_movie, encode_movie
from mymovies.core.entities.movie import Movie
from mymovies.core.exceptions import NotFoundError
from mymovies.core.ports.api_clients import IMovieAPIClient

BASE_URL = "http://api.test/api/movies"

INCEPTION_JSON = {"id": 1, "title": "Inception", "genre": "Sci-Fi", "year": 2010, "rating": 8.8}
ALIEN_JSON = {"id": 2, "title": "Alien", "genre": "Horreur", "year": 1979, "rating": 8.5}


@pytest.fixture
def api_client() -> MovieAPIClient:
    """MovieAPIClient pointing at the mocked API."""
    return MovieAPIClient(base_url=BASE_URL)


class TestCodec:
    """Tests for decode_movie / encode_movie."""

    def test_decode_uses_decimal_rating(self):
        movie = decode_movie(INCEPTION_JSON)

        assert movie == Movie(
            id=1, title="Inception", genre="Sci-Fi", year=2010, rating=Decimal("8.8")
        )

    def test_encode_drops_id(self):
        payload = encode_movie(Movie(id=5, title="Heat", genre="Policier", year=1995))

        assert "id" not in payload
        assert payload == {"title": "Heat", "genre": "Policier", "year": 1995, "rating": 0.0}


class TestMovieAPIClient:
    """Tests for the four client operations."""

    def test_implements_interface(self, api_client: MovieAPIClient):
        assert isinstance(api_client, IMovieAPIClient)

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_all(self, api_client: MovieAPIClient):
        respx.get(BASE_URL).mock(
            return_value=httpx.Response(200, json=[INCEPTION_JSON, ALIEN_JSON])
        )

        movies = await api_client.fetch_all()

        assert [m.id for m in movies] == [1, 2]
        assert movies[1].title == "Alien"
        await api_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_one(self, api_client: MovieAPIClient):
        respx.get(f"{BASE_URL}/1").mock(return_value=httpx.Response(200, json=INCEPTION_JSON))

        movie = await api_client.fetch_one(1)

        assert movie.title == "Inception"
        assert movie.rating == Decimal("8.8")
        await api_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_one_404_raises_not_found(self, api_client: MovieAPIClient):
        respx.get(f"{BASE_URL}/999").mock(return_value=httpx.Response(404))

        with pytest.raises(NotFoundError) as exc_info:
            await api_client.fetch_one(999)

        assert exc_info.value.movie_id == 999
        await api_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_create_sends_record_without_id(self, api_client: MovieAPIClient):
        route = respx.post(BASE_URL).mock(
            return_value=httpx.Response(201, json=INCEPTION_JSON)
        )

        created = await api_client.create(
            Movie(id=99, title="Inception", genre="Sci-Fi", year=2010, rating=Decimal("8.8"))
        )

        sent = json.loads(route.calls.last.request.content)
        assert sent == {"title": "Inception", "genre": "Sci-Fi", "year": 2010, "rating": 8.8}
        assert created.id == 1
        await api_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_delete(self, api_client: MovieAPIClient):
        route = respx.delete(f"{BASE_URL}/1").mock(return_value=httpx.Response(204))

        await api_client.delete(1)

        assert route.called
        await api_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_delete_404_raises_not_found(self, api_client: MovieAPIClient):
        respx.delete(f"{BASE_URL}/1").mock(return_value=httpx.Response(404))

        with pytest.raises(NotFoundError):
            await api_client.delete(1)
        await api_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_propagates_without_retry(self, api_client: MovieAPIClient):
        route = respx.get(BASE_URL).mock(return_value=httpx.Response(500))

        with pytest.raises(httpx.HTTPStatusError):
            await api_client.fetch_all()

        assert route.call_count == 1
        await api_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_error_propagates(self, api_client: MovieAPIClient):
        respx.get(BASE_URL).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(httpx.TransportError):
            await api_client.fetch_all()
        await api_client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_nothing_sent_until_awaited(self, api_client: MovieAPIClient):
        route = respx.get(BASE_URL).mock(return_value=httpx.Response(200, json=[]))

        pending = api_client.fetch_all()
        assert not route.called

        await pending
        assert route.called
        await api_client.close()

    @pytest.mark.asyncio
    async def test_context_manager_closes_client(self):
        async with MovieAPIClient(base_url=BASE_URL) as api_client:
            http_client = api_client._get_client()

        assert http_client.is_closed
