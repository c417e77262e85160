from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ArtistSummary:
    id: str
    name: str
    genres: list[str] = field(default_factory=list)
    image_url: str | None = None


@dataclass(slots=True)
class TrackSummary:
    id: str
    name: str


@dataclass(slots=True)
class AudioFeatureVector:
    danceability: float
    energy: float
    tempo: float
    valence: float
    acousticness: float
    instrumentalness: float


@dataclass(slots=True)
class ListeningProfile:
    artists: list[ArtistSummary]
    tracks: list[TrackSummary]
    audio_features: list[AudioFeatureVector] = field(default_factory=list)
    display_name: str | None = None
    user_id: str | None = None
    image_url: str | None = None

    def user_dict(self) -> dict:
        return {"id": self.user_id, "name": self.display_name, "image": self.image_url}


@dataclass(slots=True)
class CompatibilityMetrics:
    artist_overlap: float
    genre_overlap: float
    track_overlap: float
    audio_features_score: float
    # False when either side had no usable audio feature vectors.
    audio_features_available: bool = True

    def to_dict(self) -> dict:
        return {
            "artistOverlap": self.artist_overlap,
            "genreOverlap": self.genre_overlap,
            "trackOverlap": self.track_overlap,
            "audioFeaturesScore": self.audio_features_score,
            "audioFeaturesAvailable": self.audio_features_available,
        }


@dataclass(slots=True)
class SimilarArtistPair:
    user1_artist: ArtistSummary
    user2_artist: ArtistSummary
    shared_genres: list[str]

    def to_dict(self) -> dict:
        return {
            "user1Artist": {"name": self.user1_artist.name, "genres": list(self.user1_artist.genres)},
            "user2Artist": {"name": self.user2_artist.name, "genres": list(self.user2_artist.genres)},
            "sharedGenres": list(self.shared_genres),
        }


@dataclass(slots=True)
class SharedArtists:
    exact: list[ArtistSummary] = field(default_factory=list)
    similar: list[SimilarArtistPair] = field(default_factory=list)

    def to_dict(self) -> dict:
        exact = []
        for artist in self.exact:
            entry = {"name": artist.name, "id": artist.id}
            if artist.image_url:
                entry["image"] = artist.image_url
            exact.append(entry)
        return {"exact": exact, "similar": [pair.to_dict() for pair in self.similar]}


@dataclass(slots=True)
class CompatibilityMessages:
    overall: str
    artist_message: str
    genre_message: str
    playlist_message: str

    def to_dict(self) -> dict:
        return {
            "overall": self.overall,
            "artistMessage": self.artist_message,
            "genreMessage": self.genre_message,
            "playlistMessage": self.playlist_message,
        }


@dataclass(slots=True)
class CompatibilityResult:
    score: int
    metrics: CompatibilityMetrics
    shared_artists: SharedArtists
    messages: CompatibilityMessages

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "metrics": self.metrics.to_dict(),
            "sharedArtists": self.shared_artists.to_dict(),
            "messages": self.messages.to_dict(),
        }
