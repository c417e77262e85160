from __future__ import annotations

import warnings
from collections.abc import Sequence

import spotipy
from requests.exceptions import HTTPError
from spotipy.exceptions import SpotifyException

from music_match.analysis import build_listening_profile
from music_match.config import AUDIO_FEATURES_LIMIT, TOP_ITEMS_LIMIT, default_time_range
from music_match.models import ListeningProfile


def _status_of(exc: HTTPError | SpotifyException) -> int | None:
    if isinstance(exc, HTTPError):
        return exc.response.status_code if exc.response is not None else None
    return exc.http_status


class SpotifyService:
    """Reads one user's listening history with their access token."""

    # Statuses the audio-features endpoint answers with when it is restricted
    # for the app or has been retired.
    _AUDIO_FEATURES_UNAVAILABLE = (403, 404)

    def __init__(self, access_token: str) -> None:
        if not access_token or not access_token.strip():
            raise ValueError("A Spotify access token is required.")
        self.client = spotipy.Spotify(auth=access_token)

    @staticmethod
    def _clamp_limit(limit: int) -> int:
        return max(1, min(limit, TOP_ITEMS_LIMIT))

    def get_top_artists(self, limit: int = TOP_ITEMS_LIMIT, time_range: str | None = None) -> list[dict]:
        page = self.client.current_user_top_artists(
            limit=self._clamp_limit(limit),
            time_range=time_range or default_time_range(),
        )
        return [item for item in (page or {}).get("items", []) if item]

    def get_top_tracks(self, limit: int = TOP_ITEMS_LIMIT, time_range: str | None = None) -> list[dict]:
        page = self.client.current_user_top_tracks(
            limit=self._clamp_limit(limit),
            time_range=time_range or default_time_range(),
        )
        return [item for item in (page or {}).get("items", []) if item]

    def get_audio_features(self, track_ids: Sequence[str]) -> list[dict]:
        batch = [tid for tid in track_ids if tid][:AUDIO_FEATURES_LIMIT]
        if not batch:
            return []
        # Audio features are an optional signal: any failed fetch scores without them.
        try:
            result = self.client.audio_features(batch)
        except (HTTPError, SpotifyException) as exc:
            status = _status_of(exc)
            if status in self._AUDIO_FEATURES_UNAVAILABLE:
                detail = "This endpoint may be restricted for your app credentials."
            else:
                detail = "The request failed."
            warnings.warn(
                f"Spotify audio-features endpoint returned {status}. {detail} "
                "Scoring without audio features.",
                RuntimeWarning,
                stacklevel=2,
            )
            return []
        return [features for features in (result or []) if features]

    def get_current_user(self) -> dict:
        """Id, display name and first profile image of the token's owner."""
        user = self.client.current_user() or {}
        images = user.get("images") or []
        return {
            "id": user.get("id"),
            "name": user.get("display_name") or user.get("id"),
            "image": images[0].get("url") if images else None,
        }

    def get_display_name(self) -> str | None:
        return self.get_current_user()["name"]

    def fetch_listening_profile(
        self,
        limit: int = TOP_ITEMS_LIMIT,
        time_range: str | None = None,
    ) -> ListeningProfile:
        artists = self.get_top_artists(limit=limit, time_range=time_range)
        tracks = self.get_top_tracks(limit=limit, time_range=time_range)
        features = self.get_audio_features([t.get("id") for t in tracks])
        user = self.get_current_user()
        return build_listening_profile(
            artists,
            tracks,
            features,
            display_name=user["name"],
            user_id=user["id"],
            image_url=user["image"],
        )
