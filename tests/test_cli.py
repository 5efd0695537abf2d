import json
from pathlib import Path

from typer.testing import CliRunner

from mapcam.cli import app

runner = CliRunner()


def test_span_command():
    result = runner.invoke(app, ["span", "0"])
    assert result.exit_code == 0
    assert "latitudeDelta=360.000000" in result.stdout


def test_project_command():
    result = runner.invoke(app, ["project", "0", "0"])
    assert result.exit_code == 0
    assert "x=268435456.000" in result.stdout


def test_region_command():
    result = runner.invoke(app, ["region", "35.6762", "139.6503", "12", "390", "844"])
    assert result.exit_code == 0
    assert "northeast" in result.stdout
    assert "southwest" in result.stdout


def test_replay_command(tmp_path: Path):
    commands = [
        {"method": "map#setCenterCoordinate", "payload": {"target": [51.5, -0.12], "zoom": 1}},
        {"method": "map#zoomIn"},
        {"method": "map#getZoomLevel"},
    ]
    path = tmp_path / "commands.json"
    path.write_text(json.dumps(commands), encoding="utf-8")

    result = runner.invoke(app, ["replay", str(path)])

    assert result.exit_code == 0, result.stdout
    assert "map#getZoomLevel -> 3.0" in result.stdout


def test_replay_unknown_command_fails(tmp_path: Path):
    path = tmp_path / "commands.json"
    path.write_text(json.dumps([{"method": "map#spin"}]), encoding="utf-8")

    result = runner.invoke(app, ["replay", str(path)])

    assert result.exit_code == 1


def test_replay_rejects_non_list(tmp_path: Path):
    path = tmp_path / "commands.json"
    path.write_text(json.dumps({"method": "map#zoomIn"}), encoding="utf-8")

    result = runner.invoke(app, ["replay", str(path)])

    assert result.exit_code == 1
