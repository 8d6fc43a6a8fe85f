"""Theme colours, window dimensions and panel geometry for the player window."""

Colour = tuple[float, ...]


def _rgb(red: int, green: int, blue: int) -> tuple[float, float, float]:
    return (red / 255.0, green / 255.0, blue / 255.0)


BACKGROUND_COLOUR: Colour = (*_rgb(18, 18, 18), 1.0)
SURFACE_COLOUR: Colour = (*_rgb(33, 33, 33), 1.0)
BORDER_COLOUR: Colour = _rgb(83, 83, 83)
GREEN_COLOUR: Colour = (*_rgb(29, 185, 84), 1.0)
TEXT_COLOUR: Colour = (1.0, 1.0, 1.0, 1.0)

WINDOW_WIDTH = 320
WINDOW_HEIGHT = 240

PANEL_X = 40.0
PANEL_Y = 0.0
PANEL_WIDTH = 240.0
PANEL_HEIGHT = 240.0


def panel_vertices(x: float, y: float, width: float, height: float) -> tuple[float, ...]:
    """Return the 2D vertices of two triangles covering a rectangle.

    The result is a flat tuple of twelve floats: three (x, y) points for
    each triangle.
    """
    left, bottom = float(x), float(y)
    right, top = left + width, bottom + height
    return (
        left, top,
        left, bottom,
        right, top,
        right, top,
        left, bottom,
        right, bottom,
    )


PANEL_VERTICES = panel_vertices(PANEL_X, PANEL_Y, PANEL_WIDTH, PANEL_HEIGHT)