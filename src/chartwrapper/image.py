"""Fetching the rendered chart image from the chart service."""

from io import BytesIO

import httpx
from PIL import Image, UnidentifiedImageError

from .chart import ChartSpec
from .constants import GOOGLE_API
from .log import get_logger

DEFAULT_TIMEOUT = 10.0  # Seconds

logger = get_logger("image")


class ChartFetchError(Exception):
    """Raised when a chart image can not be downloaded or decoded."""
    pass


def fetch_image_bytes(
    chart: ChartSpec,
    base_url: str = GOOGLE_API,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.Client | None = None,
) -> bytes:
    """
    Download the rendered chart.

    Args:
        chart: Chart to render
        base_url: Service location the parameters are appended to
        timeout: Request timeout in seconds
        client: Optional client to reuse (for example with a mock transport)

    Returns:
        Raw image bytes as returned by the service

    Raises:
        ChartFetchError: If the request fails or the service answers with an error
    """
    url = chart.get_url(base_url)
    logger.debug("Fetching chart image from %s", url)
    try:
        if client is not None:
            response = client.get(url, timeout=timeout)
        else:
            with httpx.Client() as own_client:
                response = own_client.get(url, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise ChartFetchError(f"Failed to fetch chart image: {e}") from e
    return response.content


def fetch_image(
    chart: ChartSpec,
    base_url: str = GOOGLE_API,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.Client | None = None,
) -> Image.Image:
    """Download the rendered chart and decode it with Pillow."""
    data = fetch_image_bytes(chart, base_url, timeout=timeout, client=client)
    try:
        image = Image.open(BytesIO(data))
        image.load()
    except UnidentifiedImageError as e:
        raise ChartFetchError(f"Chart service did not return an image: {e}") from e
    return image
