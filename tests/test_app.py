import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from music_match.app import format_report, load_profile, main
from music_match.compatibility import compare_profiles


def _write_profile(directory: str, name: str, artists: list[dict], tracks: list[dict],
                   audio_features: list | None = None) -> str:
    path = Path(directory) / name
    payload = {"artists": artists, "tracks": tracks}
    if audio_features is not None:
        payload["audio_features"] = audio_features
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


_ARTIST_A1 = {"id": "a1", "name": "Alpha", "genres": ["pop"], "images": []}
_ARTIST_A2 = {"id": "a2", "name": "Beta", "genres": ["rock"], "images": []}
_TRACK_T1 = {"id": "t1", "name": "Song"}


class LoadProfileTests(unittest.TestCase):
    def test_loads_raw_spotify_shape(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _write_profile(tmpdir, "p.json", [_ARTIST_A1], [_TRACK_T1], [None])
            profile = load_profile(path)

        self.assertEqual(profile.artists[0].name, "Alpha")
        self.assertEqual(profile.tracks[0].id, "t1")
        self.assertEqual(profile.audio_features, [])

    def test_rejects_non_object_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bad.json"
            path.write_text("[]", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_profile(str(path))


class MainTests(unittest.TestCase):
    def setUp(self) -> None:
        self._original_seed = os.environ.pop("MESSAGE_SEED", None)

    def tearDown(self) -> None:
        if self._original_seed is not None:
            os.environ["MESSAGE_SEED"] = self._original_seed

    def test_json_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            first = _write_profile(tmpdir, "one.json", [_ARTIST_A1, _ARTIST_A2], [_TRACK_T1])
            second = _write_profile(tmpdir, "two.json", [_ARTIST_A1], [_TRACK_T1])
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                main([first, second, "--json"])

        payload = json.loads(buffer.getvalue())
        # artists 1/2, genres 1/2, tracks 1, no audio -> 0.35 * 0.5 * 2 + 0.3
        self.assertEqual(payload["score"], 65)
        self.assertEqual(payload["sharedArtists"]["exact"], [{"name": "Alpha", "id": "a1"}])

    def test_text_report(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            first = _write_profile(tmpdir, "one.json", [_ARTIST_A1], [_TRACK_T1])
            second = _write_profile(tmpdir, "two.json", [_ARTIST_A1], [_TRACK_T1])
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                main([first, second])

        output = buffer.getvalue()
        self.assertIn("Compatibility: 100%", output)
        self.assertIn("audio n/a", output)
        self.assertIn("Shared artists: Alpha", output)

    def test_format_report_shows_audio_when_available(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            features = {"danceability": 0.5, "energy": 0.5, "tempo": 100.0, "valence": 0.5,
                        "acousticness": 0.5, "instrumentalness": 0.5}
            path = _write_profile(tmpdir, "one.json", [_ARTIST_A1], [_TRACK_T1], [features])
            profile = load_profile(path)

        report = format_report(compare_profiles(profile, profile))
        self.assertIn("audio 1.00", report)


if __name__ == "__main__":
    unittest.main()
