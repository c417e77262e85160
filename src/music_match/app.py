from __future__ import annotations

import argparse
import json
import random
from pathlib import Path

from music_match.analysis import build_listening_profile
from music_match.compatibility import compare_profiles
from music_match.config import env_int, load_local_env_file
from music_match.messages import MessageFormatter
from music_match.models import CompatibilityResult, ListeningProfile


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Music Match compatibility report")
    parser.add_argument("profile1", help="JSON file with the first user's artists, tracks and audio_features")
    parser.add_argument("profile2", help="JSON file with the second user's artists, tracks and audio_features")
    parser.add_argument(
        "--seed",
        type=int,
        default=env_int("MESSAGE_SEED", None),
        help="Seed for message variety (defaults to MESSAGE_SEED env; canonical messages when unset)",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser.parse_args(argv)


def load_profile(path: str) -> ListeningProfile:
    """Read a profile saved in raw Spotify API shape."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object with 'artists' and 'tracks'")
    return build_listening_profile(
        data.get("artists", []),
        data.get("tracks", []),
        data.get("audio_features", []),
        display_name=data.get("display_name"),
    )


def format_report(result: CompatibilityResult) -> str:
    metrics = result.metrics
    audio = f"{metrics.audio_features_score:.2f}" if metrics.audio_features_available else "n/a"
    lines = [
        f"Compatibility: {result.score}%",
        f"  artists {metrics.artist_overlap:.2f} | genres {metrics.genre_overlap:.2f} | "
        f"tracks {metrics.track_overlap:.2f} | audio {audio}",
        "",
        result.messages.overall,
        result.messages.artist_message,
        result.messages.genre_message,
    ]
    if result.shared_artists.exact:
        lines.append("Shared artists: " + ", ".join(a.name for a in result.shared_artists.exact))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    load_local_env_file()
    args = parse_args(argv)

    profile1 = load_profile(args.profile1)
    profile2 = load_profile(args.profile2)
    rng = random.Random(args.seed) if args.seed is not None else None

    result = compare_profiles(profile1, profile2, formatter=MessageFormatter(rng))
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_report(result))


if __name__ == "__main__":
    main()
