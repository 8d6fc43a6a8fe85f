import pytest

from spotifygui import config


def _points(vertices):
    return list(zip(vertices[0::2], vertices[1::2]))


def _triangle_area(a, b, c):
    return abs((b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1])) / 2


def test_full_window_panel_spans_window_dimensions():
    points = _points(config.panel_vertices(0, 0, config.WINDOW_WIDTH, config.WINDOW_HEIGHT))
    assert max(px for px, _ in points) == 320
    assert max(py for _, py in points) == 240
    assert min(px for px, _ in points) == 0
    assert min(py for _, py in points) == 0


def test_panel_vertices_has_two_triangles():
    vertices = config.panel_vertices(1, 2, 3, 4)
    assert len(vertices) == 12
    assert all(isinstance(value, float) for value in vertices)


@pytest.mark.parametrize("x,y,width,height", [(40, 0, 240, 240), (0, 0, 1, 1), (5.5, -3, 10, 2)])
def test_panel_vertices_stay_inside_rectangle(x, y, width, height):
    points = _points(config.panel_vertices(x, y, width, height))
    for px, py in points:
        assert x <= px <= x + width
        assert y <= py <= y + height


@pytest.mark.parametrize("x,y,width,height", [(40, 0, 240, 240), (2, 3, 7, 11)])
def test_panel_triangles_cover_rectangle(x, y, width, height):
    points = _points(config.panel_vertices(x, y, width, height))
    first, second = points[:3], points[3:]
    total = _triangle_area(*first) + _triangle_area(*second)
    assert total == pytest.approx(width * height)
    corners = {(x, y), (x + width, y), (x, y + height), (x + width, y + height)}
    assert set(points) == corners


def test_panel_constant_matches_function():
    assert config.PANEL_VERTICES == config.panel_vertices(
        config.PANEL_X, config.PANEL_Y, config.PANEL_WIDTH, config.PANEL_HEIGHT
    )


def test_panel_fits_window():
    vertices = config.panel_vertices(
        config.PANEL_X, config.PANEL_Y, config.PANEL_WIDTH, config.PANEL_HEIGHT
    )
    for px, py in _points(vertices):
        assert 0 <= px <= config.WINDOW_WIDTH
        assert 0 <= py <= config.WINDOW_HEIGHT


def test_panel_is_centred_horizontally():
    points = _points(
        config.panel_vertices(
            config.PANEL_X, config.PANEL_Y, config.PANEL_WIDTH, config.PANEL_HEIGHT
        )
    )
    left = min(px for px, _ in points)
    right = max(px for px, _ in points)
    assert (left, right) == (40.0, 280.0)