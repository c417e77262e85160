from __future__ import annotations

import random

from music_match.models import CompatibilityMessages, SharedArtists

# Each band lists synonymous lines; the first one is the canonical text.
_OVERALL_BANDS: list[tuple[int, list[str]]] = [
    (80, [
        "Wow, you two are practically musical soulmates! Your tastes align beautifully.",
        "Your playlists could finish each other's sentences. A near-perfect match!",
    ]),
    (60, [
        "You've got great compatibility! There's a lot of common ground here.",
        "Solid match! You two would rarely fight over the aux cord.",
    ]),
    (40, [
        "Decent compatibility. You share some common artists and genres, but there's room to explore!",
        "Some overlap, some surprises. Plenty to trade recommendations about.",
    ]),
]
_OVERALL_LOW = [
    "Your tastes are quite different, but hey, opposites attract, right? Or maybe not in music...",
    "Different worlds entirely. Road trips might need two playlists.",
]

_GENRE_BANDS: list[tuple[int, list[str]]] = [
    (70, [
        "Your genre preferences are a strong match!",
        "You're tuned to the same genres.",
    ]),
    (50, [
        "You've got some solid genre overlap.",
        "Your genres cross paths more often than not.",
    ]),
]
_GENRE_LOW = [
    "Your preferred genres might be a bit different, offering a chance for musical discovery.",
    "Your genres rarely meet, which leaves a lot to discover from each other.",
]

_NO_SHARED_ARTISTS = [
    "You don't have many overlapping top artists. Time to introduce each other to some new tunes!",
    "No shared favourites yet. Swap a few tracks and see what sticks!",
]

_PLAYLIST_MESSAGES = [
    "We've created a special 'Compatibility Mix' for you. Check it out on Spotify!",
    "A 'Compatibility Mix' is waiting for you both on Spotify!",
]


def _band(score: int, bands: list[tuple[int, list[str]]], fallback: list[str]) -> list[str]:
    for threshold, lines in bands:
        if score >= threshold:
            return lines
    return fallback


class MessageFormatter:
    """Builds the four compatibility messages for a score.

    Without an ``rng`` the canonical line of every band is used, which keeps
    the output deterministic. Pass a seeded ``random.Random`` for variety.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    def _pick(self, options: list[str]) -> str:
        if self._rng is None:
            return options[0]
        return self._rng.choice(options)

    def artist_message(self, shared_artists: SharedArtists) -> str:
        exact = shared_artists.exact
        if exact:
            top_shared = ", ".join(artist.name for artist in exact[:3])
            message = f"You both love {top_shared}! That's a great starting point."
            if len(exact) > 3:
                message += f" And {len(exact) - 3} more!"
            return message

        if shared_artists.similar:
            first = shared_artists.similar[0]
            return (
                "While you don't share exact top artists, you both like artists in the "
                f"{first.shared_genres[0]} genre, like {first.user1_artist.name} and {first.user2_artist.name}."
            )

        return self._pick(_NO_SHARED_ARTISTS)

    def build(self, score: int, shared_artists: SharedArtists) -> CompatibilityMessages:
        return CompatibilityMessages(
            overall=self._pick(_band(score, _OVERALL_BANDS, _OVERALL_LOW)),
            artist_message=self.artist_message(shared_artists),
            genre_message=self._pick(_band(score, _GENRE_BANDS, _GENRE_LOW)),
            playlist_message=self._pick(_PLAYLIST_MESSAGES),
        )
