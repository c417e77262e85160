from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from music_match.models import (
    ArtistSummary,
    AudioFeatureVector,
    ListeningProfile,
    TrackSummary,
)


def _first_image_url(item: dict) -> str | None:
    images = item.get("images") or []
    if not images:
        return None
    return images[0].get("url") or None


def build_artist_summary(artist: dict) -> ArtistSummary:
    return ArtistSummary(
        id=artist["id"],
        name=artist.get("name", ""),
        genres=list(artist.get("genres") or []),
        image_url=_first_image_url(artist),
    )


def build_track_summary(track: dict) -> TrackSummary:
    return TrackSummary(id=track["id"], name=track.get("name", ""))


def build_audio_features(features: dict | None) -> AudioFeatureVector | None:
    # The audio-features endpoint returns null for tracks it has no analysis for.
    if not features:
        return None
    return AudioFeatureVector(
        danceability=float(features.get("danceability") or 0.0),
        energy=float(features.get("energy") or 0.0),
        tempo=float(features.get("tempo") or 0.0),
        valence=float(features.get("valence") or 0.0),
        acousticness=float(features.get("acousticness") or 0.0),
        instrumentalness=float(features.get("instrumentalness") or 0.0),
    )


def build_listening_profile(
    artists: Iterable[dict],
    tracks: Iterable[dict],
    audio_features: Iterable[dict | None] | None = None,
    display_name: str | None = None,
    user_id: str | None = None,
    image_url: str | None = None,
) -> ListeningProfile:
    vectors = [build_audio_features(f) for f in (audio_features or [])]
    return ListeningProfile(
        artists=[build_artist_summary(a) for a in artists],
        tracks=[build_track_summary(t) for t in tracks],
        audio_features=[v for v in vectors if v is not None],
        display_name=display_name,
        user_id=user_id,
        image_url=image_url,
    )


def top_genres(artists: Iterable[ArtistSummary], limit: int = 5) -> list[str]:
    """Most frequent genres across ``artists``; ties keep first-seen order."""
    counts = Counter(genre for artist in artists for genre in artist.genres)
    return [genre for genre, _ in counts.most_common(limit)]
