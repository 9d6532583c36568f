import io

import httpx
import pytest

from sensor_graph.client import SensorClient, main


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def app_transport(app):
    return httpx.ASGITransport(app=app)


@pytest.fixture
def failing_transport():
    return httpx.MockTransport(lambda request: httpx.Response(500, text="boom"))


@pytest.mark.anyio
async def test_submit_and_fetch(app_transport):
    async with SensorClient("http://testserver", transport=app_transport) as client:
        await client.submit(5.0)

        assert await client.fetch() == [
            {"data": 0.0, "time": 0},
            {"data": 0.0, "time": 0},
            {"data": 5.0, "time": 100},
        ]


@pytest.mark.anyio
async def test_reset(app_transport):
    async with SensorClient("http://testserver/", transport=app_transport) as client:
        await client.submit(5.0)
        await client.reset()

        assert await client.fetch() == [{"data": 0.0, "time": 0}] * 3


@pytest.mark.anyio
async def test_run_submits_numeric_lines(app_transport):
    async with SensorClient("http://testserver", transport=app_transport) as client:
        await client.run(io.StringIO("1.0\n\nabc\n2.5\n3\n"))

        assert client.send_count == 3
        assert [e["data"] for e in await client.fetch()] == [1.0, 2.5, 3.0]


@pytest.mark.anyio
async def test_server_error_raises(failing_transport):
    async with SensorClient("http://testserver", transport=failing_transport) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await client.submit(1.0)


@pytest.mark.anyio
async def test_run_keeps_going_after_failed_submit(failing_transport, capsys):
    async with SensorClient("http://testserver", transport=failing_transport) as client:
        await client.run(io.StringIO("1.0\n2.0\n"))

        assert client.send_count == 0
        assert capsys.readouterr().out.count("Error sending reading") == 2


def test_main_rejects_bad_url(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--url", "ftp://example.com"])

    assert exc.value.code == 1
    assert "URL must start with" in capsys.readouterr().out
