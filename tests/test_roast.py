import random
import unittest

from music_match.roast import GENERIC_ROASTS, fallback_roasts


class FallbackRoastTests(unittest.TestCase):
    def test_genre_lines_come_first(self) -> None:
        roasts = fallback_roasts([], ["rock", "pop"], count=2)
        self.assertEqual(roasts, [
            "Ah, pop music... because originality was just too much effort.",
            "Your rock collection is about as edgy as safety scissors.",
        ])

    def test_alias_genres_trigger_a_single_line(self) -> None:
        roasts = fallback_roasts([], ["rap", "hip hop"], count=10)
        hip_hop = [r for r in roasts if "hip hop choices" in r]
        self.assertEqual(len(hip_hop), 1)

    def test_artist_lines_use_first_three_artists(self) -> None:
        roasts = fallback_roasts(["A", "B", "C", "D"], [], count=10)
        artist_lines = [r for r in roasts if r.startswith("You listen to ")]
        self.assertEqual(len(artist_lines), 3)
        self.assertIn("You listen to A? I guess someone has to keep their career alive.", roasts)

    def test_generic_lines_fill_the_rest(self) -> None:
        self.assertEqual(fallback_roasts([], [], count=5), GENERIC_ROASTS[:5])

    def test_shuffle_with_seed_is_repeatable(self) -> None:
        first = fallback_roasts(["A"], ["jazz"], rng=random.Random(11))
        second = fallback_roasts(["A"], ["jazz"], rng=random.Random(11))
        self.assertEqual(first, second)
        self.assertEqual(len(first), 5)

    def test_non_positive_count_returns_nothing(self) -> None:
        self.assertEqual(fallback_roasts(["A"], ["pop"], count=0), [])


if __name__ == "__main__":
    unittest.main()
