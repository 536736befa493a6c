"""Tests for fetching chart images."""

from io import BytesIO

import httpx
import pytest
from PIL import Image

from chartwrapper.chart import ChartSpec
from chartwrapper.features import Fragment, StaticSource
from chartwrapper.image import ChartFetchError, fetch_image, fetch_image_bytes


def create_png_bytes() -> bytes:
    """Helper to create PNG bytes."""
    buffer = BytesIO()
    Image.new("RGB", (4, 3), "red").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def chart() -> ChartSpec:
    return ChartSpec("p", (300, 300), [StaticSource(Fragment("chd", "e:DICW"))])


def create_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_fetch_image_decodes_png(chart: ChartSpec) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, content=create_png_bytes())

    image = fetch_image(chart, client=create_client(handler))

    assert image.size == (4, 3)
    assert len(requests) == 1
    assert requests[0].url.host == "chart.apis.google.com"
    assert requests[0].url.params["cht"] == "p"
    assert requests[0].url.params["chs"] == "300x300"
    assert requests[0].url.params["chd"] == "e:DICW"


def test_fetch_image_bytes_uses_base_url(chart: ChartSpec) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.host == "charts.example.com"
        return httpx.Response(200, content=b"raw")

    data = fetch_image_bytes(
        chart, "https://charts.example.com/chart?", client=create_client(handler)
    )
    assert data == b"raw"


def test_server_error_raises(chart: ChartSpec) -> None:
    client = create_client(lambda request: httpx.Response(500))
    with pytest.raises(ChartFetchError, match="Failed to fetch"):
        fetch_image(chart, client=client)


def test_non_image_response_raises(chart: ChartSpec) -> None:
    client = create_client(lambda request: httpx.Response(200, content=b"<html></html>"))
    with pytest.raises(ChartFetchError, match="did not return an image"):
        fetch_image(chart, client=client)


def test_transport_error_raises(chart: ChartSpec) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(ChartFetchError):
        fetch_image(chart, client=create_client(handler))
