import unittest

from resume_pages.exceptions import ConfigError
from resume_pages.profiles import DEFAULT_PROFILES, PaperSize, SectionCapacity, get_profile, profiles_from_dict


class PaperSizeTests(unittest.TestCase):
    def test_parse_accepts_names_and_values(self) -> None:
        self.assertIs(PaperSize.parse("A4"), PaperSize.A4)
        self.assertIs(PaperSize.parse(" letter "), PaperSize.LETTER)
        self.assertIs(PaperSize.parse(PaperSize.LETTER), PaperSize.LETTER)

    def test_parse_rejects_unknown_sizes(self) -> None:
        with self.assertRaises(ConfigError):
            PaperSize.parse("legal")


class CapacityProfileTests(unittest.TestCase):
    def test_default_table_matches_tuned_capacities(self) -> None:
        a4 = get_profile(PaperSize.A4)
        letter = get_profile("letter")

        self.assertEqual(a4.first_page, SectionCapacity(4, 3, 3))
        self.assertEqual(a4.continuation, SectionCapacity(6, 5, 5))
        self.assertEqual(a4.gallery_per_page, 6)
        self.assertEqual(letter.first_page, SectionCapacity(3, 2, 2))
        self.assertEqual(letter.continuation, SectionCapacity(5, 4, 4))
        self.assertEqual(letter.gallery_per_page, 4)
        self.assertEqual((letter.page_width_mm, letter.page_height_mm), (215.9, 279.4))

    def test_every_paper_size_has_a_profile(self) -> None:
        for size in PaperSize:
            self.assertEqual(DEFAULT_PROFILES[size].paper_size, size)

    def test_injected_table_missing_a_size_is_a_config_error(self) -> None:
        table = {PaperSize.A4: DEFAULT_PROFILES[PaperSize.A4]}

        with self.assertRaises(ConfigError):
            get_profile(PaperSize.LETTER, table)


class ProfilesFromDictTests(unittest.TestCase):
    def test_partial_overrides_keep_defaults(self) -> None:
        table = profiles_from_dict({"letter": {"continuation": {"experience": 8}, "gallery_per_page": 2}})

        letter = table[PaperSize.LETTER]
        self.assertEqual(letter.continuation, SectionCapacity(8, 4, 4))
        self.assertEqual(letter.first_page, DEFAULT_PROFILES[PaperSize.LETTER].first_page)
        self.assertEqual(letter.gallery_per_page, 2)
        self.assertEqual(table[PaperSize.A4], DEFAULT_PROFILES[PaperSize.A4])

    def test_rejects_non_positive_capacities(self) -> None:
        for bad in (0, -1, "3", True, 2.5):
            with self.subTest(value=bad):
                with self.assertRaises(ConfigError):
                    profiles_from_dict({"a4": {"first_page": {"education": bad}}})

    def test_rejects_unknown_sections_and_sizes(self) -> None:
        with self.assertRaises(ConfigError):
            profiles_from_dict({"a4": {"first_page": {"hobbies": 2}}})
        with self.assertRaises(ConfigError):
            profiles_from_dict({"a5": {}})
        with self.assertRaises(ConfigError):
            profiles_from_dict(["a4"])


if __name__ == "__main__":
    unittest.main()
