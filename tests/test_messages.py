import random
import unittest

from music_match.messages import MessageFormatter
from music_match.models import ArtistSummary, SharedArtists, SimilarArtistPair


def _artists(*names: str) -> list[ArtistSummary]:
    return [ArtistSummary(id=name.lower(), name=name) for name in names]


class OverallBandTests(unittest.TestCase):
    def setUp(self) -> None:
        self.formatter = MessageFormatter()
        self.empty = SharedArtists()

    def _overall(self, score: int) -> str:
        return self.formatter.build(score, self.empty).overall

    def test_band_thresholds(self) -> None:
        self.assertTrue(self._overall(80).startswith("Wow, you two are practically musical soulmates"))
        self.assertTrue(self._overall(79).startswith("You've got great compatibility"))
        self.assertTrue(self._overall(60).startswith("You've got great compatibility"))
        self.assertTrue(self._overall(59).startswith("Decent compatibility"))
        self.assertTrue(self._overall(40).startswith("Decent compatibility"))
        self.assertTrue(self._overall(39).startswith("Your tastes are quite different"))

    def test_genre_thresholds(self) -> None:
        self.assertEqual(self.formatter.build(70, self.empty).genre_message,
                         "Your genre preferences are a strong match!")
        self.assertEqual(self.formatter.build(69, self.empty).genre_message,
                         "You've got some solid genre overlap.")
        self.assertEqual(self.formatter.build(50, self.empty).genre_message,
                         "You've got some solid genre overlap.")
        self.assertTrue(self.formatter.build(49, self.empty).genre_message.startswith(
            "Your preferred genres might be a bit different"))

    def test_playlist_message_is_fixed(self) -> None:
        self.assertEqual(
            self.formatter.build(10, self.empty).playlist_message,
            "We've created a special 'Compatibility Mix' for you. Check it out on Spotify!",
        )


class ArtistMessageTests(unittest.TestCase):
    def test_lists_up_to_three_exact_artists(self) -> None:
        shared = SharedArtists(exact=_artists("Alpha", "Beta"))
        message = MessageFormatter().artist_message(shared)
        self.assertEqual(message, "You both love Alpha, Beta! That's a great starting point.")

    def test_counts_exact_artists_beyond_three(self) -> None:
        shared = SharedArtists(exact=_artists("A", "B", "C", "D", "E"))
        message = MessageFormatter().artist_message(shared)
        self.assertEqual(message, "You both love A, B, C! That's a great starting point. And 2 more!")

    def test_falls_back_to_first_similar_pair(self) -> None:
        user1_artist = ArtistSummary(id="x", name="Xeno", genres=["shoegaze", "dream pop"])
        user2_artist = ArtistSummary(id="y", name="Yarn", genres=["dream pop", "shoegaze"])
        shared = SharedArtists(similar=[SimilarArtistPair(user1_artist, user2_artist, ["shoegaze", "dream pop"])])
        message = MessageFormatter().artist_message(shared)
        self.assertIn("in the shoegaze genre", message)
        self.assertIn("like Xeno and Yarn.", message)

    def test_no_overlap_message(self) -> None:
        message = MessageFormatter().artist_message(SharedArtists())
        self.assertTrue(message.startswith("You don't have many overlapping top artists"))


class SeededFormatterTests(unittest.TestCase):
    def test_same_seed_gives_same_messages(self) -> None:
        first = MessageFormatter(random.Random(3)).build(85, SharedArtists())
        second = MessageFormatter(random.Random(3)).build(85, SharedArtists())
        self.assertEqual(first, second)

    def test_seeded_messages_stay_in_band(self) -> None:
        canonical = MessageFormatter().build(20, SharedArtists())
        for seed in range(10):
            varied = MessageFormatter(random.Random(seed)).build(20, SharedArtists())
            self.assertNotIn("soulmates", varied.overall)
            self.assertNotEqual(varied.overall, "")
        self.assertTrue(canonical.overall.startswith("Your tastes are quite different"))


if __name__ == "__main__":
    unittest.main()
