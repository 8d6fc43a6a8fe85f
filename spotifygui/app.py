"""The player window and the command that starts it."""

import argparse
import os

from spotifygui import config
from spotifygui.shader_utils import create_shader_program
from spotifygui.spotify_api import PlaybackOption, SpotifyAPI

VERTEX_SHADER_PATH = "default.vert"
FRAGMENT_SHADER_PATH = "default.frag"


def ortho(left: float, right: float, bottom: float, top: float) -> tuple[float, ...]:
    """Return a 2D orthographic projection as a column-major 4x4 matrix."""
    width = right - left
    height = top - bottom
    return (
        2.0 / width, 0.0, 0.0, 0.0,
        0.0, 2.0 / height, 0.0, 0.0,
        0.0, 0.0, -1.0, 0.0,
        -(right + left) / width, -(top + bottom) / height, 0.0, 1.0,
    )


def run_window() -> None:
    """Open the window and draw the panel until it is closed."""
    import pyglet
    from pyglet import gl
    from pyglet.window import key

    window = pyglet.window.Window(
        config.WINDOW_WIDTH, config.WINDOW_HEIGHT, caption="Spotify GUI"
    )
    print(f"GL Version: {gl.gl_info.get_version_string()}")

    program = create_shader_program(VERTEX_SHADER_PATH, FRAGMENT_SHADER_PATH)
    program.use()

    # Screen-space projection so vertices are given in pixel coordinates.
    program["uMVP"] = ortho(0.0, float(config.WINDOW_WIDTH), 0.0, float(config.WINDOW_HEIGHT))
    red, green, blue, _ = config.SURFACE_COLOUR
    program["uColour"] = (red, green, blue, 1.0)

    panel = program.vertex_list(6, gl.GL_TRIANGLES, aPos=("f", config.PANEL_VERTICES))

    @window.event
    def on_key_press(symbol, modifiers):
        print(key.symbol_string(symbol))

    @window.event
    def on_draw():
        gl.glClearColor(*config.BACKGROUND_COLOUR)
        window.clear()
        program.use()
        panel.draw(gl.GL_TRIANGLES)

    pyglet.app.run()


def main(argv=None) -> int:
    """Skip to the next track, then open the player window."""
    parser = argparse.ArgumentParser(
        prog="spotifygui",
        description="Skip the current track and show the player window.",
    )
    parser.parse_args(argv)

    token = os.environ.get("ACCESSTOKEN")
    if token is None:
        raise SystemExit("ACCESSTOKEN is not set")

    api = SpotifyAPI(token)
    api.control_playback(PlaybackOption.SKIP)
    print()

    run_window()
    return 0