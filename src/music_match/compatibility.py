"""Compatibility scoring between two users' listening profiles.

Four signals are combined into a 0-100 score:

* artist overlap  - Jaccard similarity of top-artist ids
* genre overlap   - Jaccard similarity of the genres of those artists
* track overlap   - Jaccard similarity of top-track ids
* audio features  - 1 - mean absolute difference of the averaged feature
  vectors, tempo scaled by ``TEMPO_NORMALIZATION``

Audio features are optional. When either user has no usable vectors the
signal is marked unavailable and its weight is spread over the other three.
"""
from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Sequence

from music_match.config import AUDIO_FEATURES_LIMIT, TEMPO_NORMALIZATION
from music_match.messages import MessageFormatter
from music_match.models import (
    ArtistSummary,
    AudioFeatureVector,
    CompatibilityMetrics,
    CompatibilityResult,
    ListeningProfile,
    SharedArtists,
    SimilarArtistPair,
    TrackSummary,
)

DEFAULT_WEIGHTS = {"artists": 0.3, "genres": 0.3, "tracks": 0.2, "audio_features": 0.2}
NO_AUDIO_WEIGHTS = {"artists": 0.35, "genres": 0.35, "tracks": 0.3, "audio_features": 0.0}

_UNIT_FEATURES = ("danceability", "energy", "valence", "acousticness", "instrumentalness")


def jaccard(first: Iterable[Hashable], second: Iterable[Hashable]) -> float:
    set1 = set(first)
    set2 = set(second)
    union = set1 | set2
    if not union:
        return 0.0
    return len(set1 & set2) / len(union)


def artist_overlap(artists1: Sequence[ArtistSummary], artists2: Sequence[ArtistSummary]) -> float:
    return jaccard((a.id for a in artists1), (a.id for a in artists2))


def genre_overlap(artists1: Sequence[ArtistSummary], artists2: Sequence[ArtistSummary]) -> float:
    genres1 = (genre for artist in artists1 for genre in artist.genres)
    genres2 = (genre for artist in artists2 for genre in artist.genres)
    return jaccard(genres1, genres2)


def track_overlap(tracks1: Sequence[TrackSummary], tracks2: Sequence[TrackSummary]) -> float:
    return jaccard((t.id for t in tracks1), (t.id for t in tracks2))


def average_features(vectors: Sequence[AudioFeatureVector] | None) -> AudioFeatureVector | None:
    """Average up to ``AUDIO_FEATURES_LIMIT`` vectors; ``None`` when there are none."""
    if not vectors:
        return None
    usable = list(vectors[:AUDIO_FEATURES_LIMIT])
    count = len(usable)
    return AudioFeatureVector(
        danceability=sum(v.danceability for v in usable) / count,
        energy=sum(v.energy for v in usable) / count,
        tempo=sum(v.tempo for v in usable) / count,
        valence=sum(v.valence for v in usable) / count,
        acousticness=sum(v.acousticness for v in usable) / count,
        instrumentalness=sum(v.instrumentalness for v in usable) / count,
    )


def feature_similarity(features1: AudioFeatureVector, features2: AudioFeatureVector) -> float:
    diffs = [abs(getattr(features1, name) - getattr(features2, name)) for name in _UNIT_FEATURES]
    diffs.append(abs(features1.tempo - features2.tempo) / TEMPO_NORMALIZATION)
    return max(0.0, 1.0 - sum(diffs) / len(diffs))


def audio_features_score(
    features1: Sequence[AudioFeatureVector] | None,
    features2: Sequence[AudioFeatureVector] | None,
) -> float | None:
    avg1 = average_features(features1)
    avg2 = average_features(features2)
    if avg1 is None or avg2 is None:
        return None
    return feature_similarity(avg1, avg2)


def weighted_score(metrics: CompatibilityMetrics) -> int:
    weights = DEFAULT_WEIGHTS if metrics.audio_features_available else NO_AUDIO_WEIGHTS
    total = (
        metrics.artist_overlap * weights["artists"]
        + metrics.genre_overlap * weights["genres"]
        + metrics.track_overlap * weights["tracks"]
        + metrics.audio_features_score * weights["audio_features"]
    )
    # Half-up rounding; round() would send 42.5 to 42.
    return int(math.floor(total * 100 + 0.5))


def find_shared_artists(
    artists1: Sequence[ArtistSummary],
    artists2: Sequence[ArtistSummary],
) -> SharedArtists:
    user1_ids = {artist.id for artist in artists1}
    exact = [artist for artist in artists2 if artist.id in user1_ids]

    # Plain nested scan; top-N lists are capped at 50 per user.
    similar: list[SimilarArtistPair] = []
    for artist1 in artists1:
        for artist2 in artists2:
            if artist1.id == artist2.id:
                continue
            other_genres = set(artist2.genres)
            shared_genres = [genre for genre in artist1.genres if genre in other_genres]
            if shared_genres:
                similar.append(
                    SimilarArtistPair(
                        user1_artist=artist1,
                        user2_artist=artist2,
                        shared_genres=shared_genres,
                    )
                )
    return SharedArtists(exact=exact, similar=similar)


def compute_compatibility(
    user1_artists: Sequence[ArtistSummary],
    user2_artists: Sequence[ArtistSummary],
    user1_tracks: Sequence[TrackSummary],
    user2_tracks: Sequence[TrackSummary],
    user1_features: Sequence[AudioFeatureVector] | None = None,
    user2_features: Sequence[AudioFeatureVector] | None = None,
    formatter: MessageFormatter | None = None,
) -> CompatibilityResult:
    """Score how well two users' listening histories match.

    ``user*_features`` are per-track audio feature vectors. A caller holding an
    already averaged vector can pass it as a one-element sequence.
    """
    audio_score = audio_features_score(user1_features, user2_features)
    metrics = CompatibilityMetrics(
        artist_overlap=artist_overlap(user1_artists, user2_artists),
        genre_overlap=genre_overlap(user1_artists, user2_artists),
        track_overlap=track_overlap(user1_tracks, user2_tracks),
        audio_features_score=audio_score if audio_score is not None else 0.0,
        audio_features_available=audio_score is not None,
    )
    score = weighted_score(metrics)
    shared_artists = find_shared_artists(user1_artists, user2_artists)
    messages = (formatter or MessageFormatter()).build(score, shared_artists)
    return CompatibilityResult(
        score=score,
        metrics=metrics,
        shared_artists=shared_artists,
        messages=messages,
    )


def compare_profiles(
    profile1: ListeningProfile,
    profile2: ListeningProfile,
    formatter: MessageFormatter | None = None,
) -> CompatibilityResult:
    return compute_compatibility(
        profile1.artists,
        profile2.artists,
        profile1.tracks,
        profile2.tracks,
        profile1.audio_features,
        profile2.audio_features,
        formatter=formatter,
    )
