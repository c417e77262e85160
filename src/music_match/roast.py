"""Static music-taste roasts used when no generated commentary is available."""
from __future__ import annotations

import random
from collections.abc import Sequence

GENERIC_ROASTS = [
    "Your playlist is what I'd expect to hear in an elevator... to hell.",
    "I see you've curated your music with all the precision of a blindfolded dart player.",
    "Congratulations on having the musical taste of a middle schooler trying to impress their crush.",
    "Your music library is basically a monument to algorithms that gave up on you.",
    "I'd rather listen to my neighbor's lawnmower than another minute of your playlist.",
    "If your music taste was a spice, it would be flour.",
    "Your playlist is the audio equivalent of watching paint dry.",
    "I've heard more musical diversity in a car alarm.",
    "Do you listen to this music ironically, or are you genuinely this uncool?",
    "If this playlist was a person, it would be the one who brings a guitar to a party.",
]

# (genres that trigger the line, roast)
GENRE_ROASTS: list[tuple[tuple[str, ...], str]] = [
    (("pop",), "Ah, pop music... because originality was just too much effort."),
    (("rock",), "Your rock collection is about as edgy as safety scissors."),
    (("hip hop", "rap"),
     "Your hip hop choices suggest you think wearing a baseball cap backward is still rebellious."),
    (("indie",),
     "Let me guess, you only liked these indie bands 'before they were cool'... and sadly, they still aren't."),
    (("electronic", "edm"), "Your electronic music taste has all the depth of a kiddie pool."),
    (("classical",),
     "Classical music, huh? Trying to convince everyone you're sophisticated when we all know you're just napping."),
    (("jazz",),
     "Jazz fan? So you pretend to understand what's happening while secretly wondering "
     "when the actual song will start."),
    (("metal",),
     "Your metal playlist suggests you're still angry about that time someone stole your "
     "lunch money in 7th grade."),
    (("country",),
     "Country music? I didn't realize you were going through a divorce and lost your truck "
     "and dog simultaneously."),
    (("r&b", "soul"),
     "Your R&B collection suggests you think you're smooth, but we both know you have the "
     "romantic grace of a giraffe on roller skates."),
]


def fallback_roasts(
    artist_names: Sequence[str],
    genres: Sequence[str],
    count: int = 5,
    rng: random.Random | None = None,
) -> list[str]:
    """Pick ``count`` roasts: genre lines, then artist lines, then generic ones.

    With an ``rng`` the combined pool is shuffled before truncating.
    """
    genre_set = set(genres)
    genre_lines = [line for triggers, line in GENRE_ROASTS if genre_set.intersection(triggers)]
    artist_lines = [
        f"You listen to {artist}? I guess someone has to keep their career alive."
        for artist in artist_names[:3]
    ]
    pool = genre_lines + artist_lines + GENERIC_ROASTS
    if rng is not None:
        rng.shuffle(pool)
    return pool[:max(count, 0)]
