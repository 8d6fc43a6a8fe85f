"""A small client for the Spotify Web API player endpoints."""

import enum

import requests

API_BASE = "https://api.spotify.com/v1"
CURRENTLY_PLAYING_URL = f"{API_BASE}/me/player/currently-playing"
TOP_TRACKS_URL = f"{API_BASE}/me/top/tracks"
PLAY_URL = f"{API_BASE}/me/player/play"
PAUSE_URL = f"{API_BASE}/me/player/pause"
NEXT_URL = f"{API_BASE}/me/player/next"

TOP_TRACKS_LIMIT = 50
_TIMEOUT = 10


class PlaybackOption(enum.Enum):
    """Playback commands that can be sent to the player."""

    PLAY = enum.auto()
    PAUSE = enum.auto()
    SKIP = enum.auto()
    BACK = enum.auto()


_PLAYBACK_URLS = {
    PlaybackOption.PLAY: PLAY_URL,
    PlaybackOption.PAUSE: PAUSE_URL,
    PlaybackOption.SKIP: NEXT_URL,
}


class SpotifyAPI:
    """Issues authenticated requests against the player endpoints."""

    def __init__(self, token: str) -> None:
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"Bearer {token}"

    def _request(self, method: str, url: str, **kwargs) -> str:
        try:
            response = self._session.request(method, url, timeout=_TIMEOUT, **kwargs)
        except requests.RequestException:
            return ""
        return response.text

    def fetch_currently_playing(self) -> str:
        """Return the raw JSON body describing the current track, or ''."""
        return self._request("GET", CURRENTLY_PLAYING_URL)

    def fetch_top_songs(self) -> str:
        """Return the raw JSON body listing the user's top tracks, or ''."""
        return self._request("GET", TOP_TRACKS_URL, params={"limit": TOP_TRACKS_LIMIT})

    def play_music(self) -> None:
        """Resume playback on the active device."""
        self._request("PUT", PLAY_URL, data="")

    def control_playback(self, option: PlaybackOption) -> None:
        """Send a play, pause or skip command to the player."""
        try:
            url = _PLAYBACK_URLS[option]
        except KeyError:
            raise ValueError(f"unsupported playback option: {option!r}") from None
        if option is PlaybackOption.SKIP:
            print("Skipping ")
        self._request("POST", url, data="")