# spotifygui

A small desktop controller for Spotify. It talks to the Spotify Web API with
your access token and skips to the next track on start-up. Then it opens a
320×240 window that draws a dark surface panel in the Spotify theme colours.
Key presses in the window are printed to standard output. Closing the window
ends the program.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running

The program reads its OAuth access token from the `ACCESSTOKEN` environment
variable. If the variable is not set, the program exits with an error. The
token needs the scopes for reading and controlling playback.

```
ACCESSTOKEN=token spotifygui
```

The window's shaders are loaded from `default.vert` and `default.frag` in the
current working directory:

- The vertex shader takes a 2D `aPos` attribute and a `uMVP` matrix.
- The fragment shader takes a `uColour` vec4.

A shader that fails to compile, or a program that fails to link, raises
`RuntimeError` with the error log.

## Using the API client

```python
from spotifygui.spotify_api import PlaybackOption, SpotifyAPI

api = SpotifyAPI("token")

print(api.fetch_currently_playing())   # raw JSON text of the current track
print(api.fetch_top_songs())           # raw JSON text of your top 50 tracks

api.control_playback(PlaybackOption.PAUSE)
api.control_playback(PlaybackOption.PLAY)
api.control_playback(PlaybackOption.SKIP)
```

The fetch methods return the response body as text, without parsing it. They
return an empty string if the request fails, or if Spotify sends no body,
which it does when nothing is playing.

`control_playback` sends a `POST` request to the play, pause or next endpoint.
`PlaybackOption.BACK` exists but has no endpoint, and passing it raises
`ValueError`. `play_music()` resumes playback with a `PUT` request.

## Other pieces

- `spotifygui.config` holds the following:
  - the theme colours
  - the window size
  - the panel geometry
  - `panel_vertices(x, y, width, height)`, which returns the two triangles of a rectangle as a flat tuple of twelve coordinates
- `spotifygui.app.ortho(left, right, bottom, top)` builds the column-major orthographic projection that maps pixel coordinates to the screen.
- `spotifygui.shader_utils` loads, compiles and links GLSL shaders. `load_shader_source` returns an empty string and reports to standard error when a file cannot be read.

## What it does not do

- The window only draws the panel. It shows no track information and has no buttons, and key presses do not control playback.
- Skipping a track on start-up is the only playback command the `spotifygui` command sends.
- There is no login or token-refresh flow. You must supply a valid access token yourself.