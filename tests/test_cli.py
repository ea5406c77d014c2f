from typer.testing import CliRunner

from tilemap.cli import app

runner = CliRunner()


def test_project_prints_world_pixel_and_tile():
    result = runner.invoke(app, ["project", "0", "0", "--zoom", "2"])
    assert result.exit_code == 0, result.output
    assert "World pixel: (512.000, 512.000)" in result.output
    assert "Tile: 2/2" in result.output


def test_project_accepts_negative_coordinates():
    result = runner.invoke(app, ["project", "--zoom", "1", "--", "-33.87", "-151.2"])
    assert result.exit_code == 0, result.output
    assert "World pixel:" in result.output


def test_unproject():
    result = runner.invoke(app, ["unproject", "512", "512", "--zoom", "2"])
    assert result.exit_code == 0, result.output
    assert "Latitude: 0.000000" in result.output
    assert "Longitude: 0.000000" in result.output


def test_info():
    result = runner.invoke(app, ["info", "--zoom", "0"])
    assert result.exit_code == 0, result.output
    assert "Map size: 256 px" in result.output
    assert "Ground resolution: 156543.0339 m/px" in result.output


def test_screen():
    result = runner.invoke(app, ["screen", "0", "0"])
    assert result.exit_code == 0, result.output
    assert "Screen point: (0.000, 0.000)" in result.output
    assert "Viewport pixel: (400.000, 300.000)" in result.output


def test_screen_rejects_negative_zoom():
    result = runner.invoke(app, ["screen", "0", "0", "--zoom", "-1"])
    assert result.exit_code == 1


def test_quad_key_commands():
    result = runner.invoke(app, ["quadkey", "3", "5", "--zoom", "3"])
    assert result.exit_code == 0, result.output
    assert "213" in result.output

    result = runner.invoke(app, ["tile", "213"])
    assert result.exit_code == 0, result.output
    assert "3/3/5" in result.output


def test_invalid_quad_key_exits_with_error():
    result = runner.invoke(app, ["tile", "129"])
    assert result.exit_code == 1


def test_screen_accepts_negative_coordinates_after_separator():
    result = runner.invoke(
        app,
        ["screen", "--center-lat", "-33.87", "--center-lon", "151.21", "--", "-33.87", "151.21"],
    )
    assert result.exit_code == 0, result.output
    assert "Viewport pixel: (400.000, 300.000)" in result.output
