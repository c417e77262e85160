from __future__ import annotations

import os
from pathlib import Path

# The top-items endpoints accept at most 50 results per request.
TOP_ITEMS_LIMIT = 50

# Batch size of the audio-features endpoint; ids beyond this are not fetched.
AUDIO_FEATURES_LIMIT = 100

# Tempo difference (BPM) treated as fully dissimilar.
TEMPO_NORMALIZATION = 200.0

VALID_TIME_RANGES = ("short_term", "medium_term", "long_term")


def load_local_env_file(env_path: str = ".env") -> None:
    """Seed ``PORT``, ``MESSAGE_SEED``, ``SPOTIFY_TIME_RANGE`` and friends from a .env file.

    Variables already set in the shell win over the file.
    """
    path = Path(env_path)
    if not path.is_file():
        return

    for entry in path.read_text(encoding="utf-8").splitlines():
        entry = entry.strip()
        if entry.startswith("#"):
            continue
        name, sep, raw_value = entry.partition("=")
        name = name.strip()
        if not sep or not name:
            continue
        os.environ.setdefault(name, raw_value.strip().strip("\"'"))


def env_int(name: str, fallback: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return fallback
    try:
        return int(raw)
    except ValueError:
        return fallback


def default_time_range() -> str:
    value = os.getenv("SPOTIFY_TIME_RANGE", "").strip()
    return value if value in VALID_TIME_RANGES else "medium_term"
