"""Tests for the command line interface."""

import pytest
from PIL import Image
from typer.testing import CliRunner

from chartwrapper import cli
from chartwrapper.cli import app
from chartwrapper.image import ChartFetchError

runner = CliRunner()

API = "http://chart.apis.google.com/chart?"


@pytest.fixture(autouse=True)
def clear_api_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(cli.API_URL_ENV, raising=False)


def test_prints_pie_chart_url() -> None:
    result = runner.invoke(app, ["60", "40", "-l", "Yes", "-l", "No", "--size", "300x150"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"{API}cht=p&chs=300x150&chd=s:8o&chl=Yes|No"


def test_three_dimensional_pie() -> None:
    result = runner.invoke(app, ["1", "2", "--3d", "--size", "200"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"{API}cht=p3&chs=200&chd=s:BC"


def test_meter_with_colors_and_title() -> None:
    result = runner.invoke(
        app, ["50", "--kind", "meter", "-l", "Fast", "-c", "red", "-c", "#00ff00", "-t", "Speed"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == f"{API}cht=gom&chco=ff0000,00ff00&chd=s:y&chl=Fast&chtt=Speed"


def test_explicit_encoding() -> None:
    result = runner.invoke(app, ["60", "40", "--encoding", "percentage"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"{API}cht=p&chd=t:60,40"


def test_base_url_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(cli.API_URL_ENV, "https://charts.example.com/chart?")
    result = runner.invoke(app, ["1"])
    assert result.stdout.strip() == "https://charts.example.com/chart?cht=p&chd=s:B"


def test_base_url_option_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(cli.API_URL_ENV, "https://env.example.com/chart?")
    result = runner.invoke(app, ["1", "--base-url", "https://opt.example.com/chart?"])
    assert result.stdout.strip() == "https://opt.example.com/chart?cht=p&chd=s:B"


def test_post_form() -> None:
    result = runner.invoke(app, ["1", "--post"])
    assert result.exit_code == 0
    assert '<input type="hidden" name="chd" value="s:B" />' in result.stdout
    assert result.stdout.strip().endswith("</form>")


def test_post_form_uses_base_url_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(cli.API_URL_ENV, "https://env.example.com/chart?")
    result = runner.invoke(app, ["1", "--post"])
    assert result.exit_code == 0
    assert "<form action='https://env.example.com/chart' method='POST'" in result.stdout

    result = runner.invoke(app, ["1", "--post", "--base-url", "https://opt.example.com/chart?"])
    assert "<form action='https://opt.example.com/chart' method='POST'" in result.stdout


def test_post_form_default_action() -> None:
    result = runner.invoke(app, ["1", "--post"])
    assert "<form action='http://chart.apis.google.com/chart' method='POST'" in result.stdout


def test_values_are_required() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert "At least one value is required" in (result.stdout + result.stderr)


def test_post_and_fetch_are_exclusive() -> None:
    result = runner.invoke(app, ["1", "--post", "--fetch", "chart.png"])
    assert result.exit_code == 1
    assert "Cannot specify both --post and --fetch" in (result.stdout + result.stderr)


@pytest.mark.parametrize("size", ["2000x10", "600x600", "wide", "0"])
def test_invalid_size(size: str) -> None:
    result = runner.invoke(app, ["1", "--size", size])
    assert result.exit_code == 1
    assert "Invalid size" in (result.stdout + result.stderr)


def test_unknown_encoding() -> None:
    result = runner.invoke(app, ["1", "--encoding", "base64"])
    assert result.exit_code == 1
    assert "Unknown encoding" in (result.stdout + result.stderr)


def test_unknown_kind() -> None:
    result = runner.invoke(app, ["1", "--kind", "radar"])
    assert result.exit_code == 1
    assert "Unknown chart kind" in (result.stdout + result.stderr)


def test_too_many_labels() -> None:
    result = runner.invoke(app, ["1", "-l", "a", "-l", "b"])
    assert result.exit_code == 1
    assert "2 labels for 1 values" in (result.stdout + result.stderr)


def test_invalid_color() -> None:
    result = runner.invoke(app, ["1", "-c", "notacolor"])
    assert result.exit_code == 1
    assert "Invalid color" in (result.stdout + result.stderr)


def test_fetch_saves_image(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    fetched_urls = []

    def fake_fetch(chart, base_url):
        fetched_urls.append(chart.get_url(base_url))
        return Image.new("RGB", (5, 5), "blue")

    monkeypatch.setattr(cli, "fetch_image", fake_fetch)
    output_path = tmp_path / "chart.png"

    result = runner.invoke(app, ["1", "--fetch", str(output_path)])

    assert result.exit_code == 0
    assert fetched_urls == [f"{API}cht=p&chd=s:B"]
    with Image.open(output_path) as image:
        assert image.size == (5, 5)


def test_fetch_error_is_reported(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    def failing_fetch(chart, base_url):
        raise ChartFetchError("Failed to fetch chart image: boom")

    monkeypatch.setattr(cli, "fetch_image", failing_fetch)
    result = runner.invoke(app, ["1", "--fetch", str(tmp_path / "chart.png")])
    assert result.exit_code == 1
    assert "Failed to fetch chart image: boom" in (result.stdout + result.stderr)
