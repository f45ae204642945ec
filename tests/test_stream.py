# test_stream.py

import httpx
import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from scrollback.stream import EmbeddedStream, RemoteStream, Stream


async def collect(generator, line):
    return [chunk async for chunk in generator(line)]


def make_remote(handler) -> RemoteStream:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return RemoteStream("http://session.test/run/", client=client)


class TestStreamFactory:

    def test_embedded_without_endpoint(self):
        assert isinstance(Stream.create(), EmbeddedStream)

    def test_remote_with_endpoint(self):
        stream = Stream.create("http://session.test")
        assert isinstance(stream, RemoteStream)
        assert stream.endpoint == "http://session.test"


class TestEmbeddedStream:

    @pytest.mark.asyncio
    async def test_echo(self):
        stream = EmbeddedStream()
        assert await collect(stream.get_generator(), "ls") == ["echo: ls"]

    @pytest.mark.asyncio
    async def test_generator_failure_becomes_error_line(self):
        async def broken(line):
            yield "partial"
            raise RuntimeError("gone")

        stream = EmbeddedStream(generator=broken)
        assert await collect(stream.get_generator(), "x") == ["partial", "Error: gone"]
        assert stream.last_error == "gone"


class TestRemoteStream:

    @pytest.mark.asyncio
    async def test_streams_response_lines(self):
        seen = {}

        def handler(request):
            seen['url'] = str(request.url)
            seen['body'] = request.content
            return httpx.Response(200, text="one\n\ntwo\n")

        stream = make_remote(handler)
        lines = await collect(stream.get_generator(), "status")
        await stream.aclose()

        assert lines == ["one", "two"]
        assert seen['url'] == "http://session.test/run"
        assert b'"line"' in seen['body'] and b'"status"' in seen['body']

    @pytest.mark.asyncio
    async def test_http_error(self):
        stream = make_remote(lambda request: httpx.Response(503))
        assert await collect(stream.get_generator(), "x") == ["Error: HTTP 503"]
        assert stream.last_error == "HTTP 503"

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        stream = make_remote(handler)
        assert await collect(stream.get_generator(), "x") == ["Error: Failed to connect"]

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        stream = make_remote(handler)
        assert await collect(stream.get_generator(), "x") == ["Error: Request timed out"]
