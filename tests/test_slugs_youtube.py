import unittest

from app.services.slugs import generate_slug, is_valid_slug
from app.services.youtube import extract_youtube_id, youtube_embed_url


class SlugTests(unittest.TestCase):
    def test_generate_slug_strips_punctuation_and_collapses_dashes(self):
        self.assertEqual(generate_slug("New Youth Leadership Program!"), "new-youth-leadership-program")
        self.assertEqual(generate_slug("Food  --  Bank"), "food-bank")
        self.assertEqual(generate_slug(None), "")

    def test_generate_slug_drops_non_ascii_letters(self):
        slug = generate_slug("Ramaḍān Programme 2025")
        self.assertEqual(slug, "ramn-programme-2025")
        self.assertTrue(is_valid_slug(slug))

    def test_is_valid_slug(self):
        self.assertTrue(is_valid_slug("quran-learning"))
        self.assertTrue(is_valid_slug("abc"))
        self.assertFalse(is_valid_slug("ab"))
        self.assertFalse(is_valid_slug("Upper-Case"))
        self.assertFalse(is_valid_slug("with space"))
        self.assertFalse(is_valid_slug(None))


class YoutubeTests(unittest.TestCase):
    def test_extracts_id_from_common_url_shapes(self):
        for url in (
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
            "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        ):
            self.assertEqual(extract_youtube_id(url), "dQw4w9WgXcQ", url)

    def test_wrong_length_or_foreign_url_has_no_id(self):
        self.assertIsNone(extract_youtube_id("https://youtu.be/short"))
        self.assertIsNone(extract_youtube_id("https://example.com/videos/family-values"))
        self.assertIsNone(extract_youtube_id(None))

    def test_embed_url_falls_back_to_given_url(self):
        self.assertEqual(
            youtube_embed_url("https://youtu.be/dQw4w9WgXcQ"),
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
        )
        self.assertEqual(
            youtube_embed_url("https://example.com/videos/family-values"),
            "https://example.com/videos/family-values",
        )


if __name__ == "__main__":
    unittest.main()
