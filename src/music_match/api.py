"""FastAPI web server for Music Match."""
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from spotipy.exceptions import SpotifyException

from music_match.analysis import top_genres
from music_match.compatibility import compare_profiles
from music_match.config import TOP_ITEMS_LIMIT, VALID_TIME_RANGES, default_time_range
from music_match.models import (
    ArtistSummary,
    AudioFeatureVector,
    ListeningProfile,
    TrackSummary,
)
from music_match.roast import fallback_roasts
from music_match.spotify_service import SpotifyService

logger = logging.getLogger(__name__)

app = FastAPI(title="Music Match")

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request models
class ArtistIn(BaseModel):
    id: str
    name: str = ""
    genres: list[str] = []
    image_url: str | None = None


class TrackIn(BaseModel):
    id: str
    name: str = ""


class AudioFeaturesIn(BaseModel):
    danceability: float = Field(ge=0.0, le=1.0)
    energy: float = Field(ge=0.0, le=1.0)
    tempo: float = Field(ge=0.0)
    valence: float = Field(ge=0.0, le=1.0)
    acousticness: float = Field(ge=0.0, le=1.0)
    instrumentalness: float = Field(ge=0.0, le=1.0)


class ProfileIn(BaseModel):
    """One user's top artists, top tracks and per-track audio features."""
    artists: list[ArtistIn] = Field(default=[], max_length=TOP_ITEMS_LIMIT)
    tracks: list[TrackIn] = Field(default=[], max_length=TOP_ITEMS_LIMIT)
    audio_features: list[AudioFeaturesIn] = []
    display_name: str | None = None

    def to_profile(self) -> ListeningProfile:
        return ListeningProfile(
            artists=[
                ArtistSummary(id=a.id, name=a.name, genres=list(a.genres), image_url=a.image_url)
                for a in self.artists
            ],
            tracks=[TrackSummary(id=t.id, name=t.name) for t in self.tracks],
            audio_features=[AudioFeatureVector(**f.model_dump()) for f in self.audio_features],
            display_name=self.display_name,
        )


class CompatibilityRequest(BaseModel):
    user1: ProfileIn
    user2: ProfileIn


class SpotifyCompatibilityRequest(BaseModel):
    """Two users' access tokens; both profiles are fetched from Spotify."""
    access_token: str = Field(min_length=1)
    friend_access_token: str = Field(min_length=1)
    time_range: str = Field(default_factory=default_time_range)
    limit: int = Field(default=TOP_ITEMS_LIMIT, ge=1, le=TOP_ITEMS_LIMIT)


def get_spotify_service(access_token: str) -> SpotifyService:
    """Build a Spotify service for one user's token."""
    return SpotifyService(access_token)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/api/compatibility")
def compatibility(request: CompatibilityRequest):
    """Score two profiles supplied in the request body."""
    result = compare_profiles(request.user1.to_profile(), request.user2.to_profile())
    return result.to_dict()


@app.post("/api/compatibility/spotify")
def spotify_compatibility(request: SpotifyCompatibilityRequest):
    """Fetch both users' listening history from Spotify, then score it."""
    if request.time_range not in VALID_TIME_RANGES:
        raise HTTPException(
            status_code=400,
            detail=f"time_range must be one of {', '.join(VALID_TIME_RANGES)}",
        )
    try:
        current = get_spotify_service(request.access_token).fetch_listening_profile(
            limit=request.limit, time_range=request.time_range
        )
        friend = get_spotify_service(request.friend_access_token).fetch_listening_profile(
            limit=request.limit, time_range=request.time_range
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SpotifyException as e:
        logger.warning("Spotify request failed: %s", e)
        if e.http_status == 401:
            raise HTTPException(status_code=401, detail="Spotify session expired. Please log in again.")
        raise HTTPException(status_code=502, detail=f"Spotify error: {e.msg}")
    except Exception as e:
        logger.exception("Failed to fetch listening profiles")
        raise HTTPException(status_code=500, detail=f"Error: {str(e)}")

    payload = compare_profiles(current, friend).to_dict()
    payload["currentUser"] = current.user_dict()
    payload["friendUser"] = friend.user_dict()
    return payload


@app.post("/api/taste")
def taste_summary(profile: ProfileIn):
    """Top genres plus static roast lines for one profile."""
    summary = profile.to_profile()
    genres = top_genres(summary.artists)
    artist_names = [artist.name for artist in summary.artists]
    return {
        "topGenres": genres,
        "topArtistNames": artist_names[:5],
        "topTrackNames": [track.name for track in summary.tracks[:5]],
        "roasts": fallback_roasts(artist_names, genres),
        "isAiGenerated": False,
    }
