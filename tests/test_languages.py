import unittest

from doc_translator.languages import LanguagePair, get_language_name, is_supported


class TestLanguages(unittest.TestCase):
    def test_swap_twice_restores_pair(self):
        pair = LanguagePair("en", "ja")
        pair.swap()
        self.assertEqual((pair.source, pair.target), ("ja", "en"))
        pair.swap()
        self.assertEqual((pair.source, pair.target), ("en", "ja"))

    def test_defaults_and_equal_pair(self):
        pair = LanguagePair()
        self.assertEqual(pair.as_dict(), {"source": "en", "target": "es"})
        pair.set("fr", "fr")
        self.assertEqual(pair.as_dict(), {"source": "fr", "target": "fr"})

    def test_unsupported_code_rejected(self):
        pair = LanguagePair()
        with self.assertRaises(ValueError):
            pair.set("en", "xx")
        self.assertEqual(pair.as_dict(), {"source": "en", "target": "es"})

    def test_language_name_falls_back_to_code(self):
        self.assertEqual(get_language_name("de"), "German")
        self.assertEqual(get_language_name("zz"), "zz")
        self.assertTrue(is_supported("pt"))
        self.assertFalse(is_supported("zz"))


if __name__ == "__main__":
    unittest.main()
