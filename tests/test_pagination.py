import unittest
from unittest.mock import patch
from typing import List, Sequence

from resume_pages.models import CertificateItem, Document, EducationItem, ExperienceItem, GalleryItem
from resume_pages.pagination import (
    SECTIONS,
    ContinuationPage,
    build_continuation_pages,
    estimate_continuation_pages,
    estimate_page_count,
    first_page_slices,
    paginate_gallery,
    plan_document,
)
from resume_pages.profiles import DEFAULT_PROFILES, PaperSize, get_profile

A4 = get_profile(PaperSize.A4)
LETTER = get_profile(PaperSize.LETTER)


def make_document(exp: int = 0, edu: int = 0, cert: int = 0, gallery: Sequence[GalleryItem] = ()) -> Document:
    return Document(
        experience=tuple(ExperienceItem(id=f"exp-{i}") for i in range(exp)),
        education=tuple(EducationItem(id=f"edu-{i}") for i in range(edu)),
        certificates=tuple(CertificateItem(id=f"cert-{i}") for i in range(cert)),
        gallery=tuple(gallery),
    )


def make_gallery(count: int, missing_image: Sequence[int] = (), missing_name: Sequence[int] = ()) -> List[GalleryItem]:
    return [
        GalleryItem(
            id=f"g-{i}",
            project_name="" if i in missing_name else f"Project {i}",
            image=None if i in missing_image else f"https://img.example/{i}.png",
        )
        for i in range(count)
    ]


class ContinuationPageTests(unittest.TestCase):
    def test_overflowing_experience_yields_single_continuation_page(self) -> None:
        pages = build_continuation_pages(make_document(exp=10, edu=2), A4)

        self.assertEqual(
            pages,
            [
                ContinuationPage(
                    experience_start=4,
                    education_start=3,
                    certificates_start=3,
                    show_experience=True,
                    show_education=False,
                    show_certificates=False,
                )
            ],
        )

    def test_sections_at_first_page_capacity_need_no_continuation(self) -> None:
        self.assertEqual(build_continuation_pages(make_document(exp=4, edu=3, cert=3), A4), [])

    def test_empty_document_needs_no_continuation(self) -> None:
        self.assertEqual(build_continuation_pages(make_document(), A4), [])
        self.assertEqual(estimate_continuation_pages(make_document(), LETTER), 0)

    def test_section_shorter_than_first_page_capacity(self) -> None:
        # one experience item against a capacity of 3: its cursor starts past the end
        pages = build_continuation_pages(make_document(exp=1, edu=7), LETTER)

        self.assertEqual(len(pages), 2)
        self.assertEqual([page.education_start for page in pages], [2, 6])
        for page in pages:
            self.assertEqual(page.experience_start, 3)
            self.assertFalse(page.show_experience)
            self.assertFalse(page.show_certificates)
            self.assertTrue(page.show_education)

    def test_sections_advance_in_lock_step(self) -> None:
        pages = build_continuation_pages(make_document(exp=20, edu=9, cert=4), A4)

        self.assertEqual(
            [(p.experience_start, p.education_start, p.certificates_start) for p in pages],
            [(4, 3, 3), (10, 8, 4), (16, 9, 4)],
        )
        self.assertEqual(
            [(p.show_experience, p.show_education, p.show_certificates) for p in pages],
            [(True, True, True), (True, True, False), (True, False, False)],
        )

    def test_thin_pages_are_emitted_for_a_single_remaining_section(self) -> None:
        pages = build_continuation_pages(make_document(cert=20), A4)

        self.assertEqual([page.certificates_start for page in pages], [3, 8, 13, 18])
        self.assertTrue(all(page.show_certificates for page in pages))
        self.assertFalse(any(page.show_experience or page.show_education for page in pages))

    def test_flag_is_set_even_when_page_slice_is_capacity_truncated(self) -> None:
        page = build_continuation_pages(make_document(exp=30), A4)[0]
        slices = page.slices(make_document(exp=30), A4)

        self.assertTrue(page.show_experience)
        self.assertEqual(len(slices["experience"]), A4.continuation.experience)
        self.assertEqual(slices["education"], ())

    def test_conservation_count_agreement_and_no_blank_pages(self) -> None:
        for profile in DEFAULT_PROFILES.values():
            for exp in range(0, 14):
                for edu in range(0, 11, 2):
                    for cert in range(0, 11, 3):
                        with self.subTest(paper=profile.paper_size.value, exp=exp, edu=edu, cert=cert):
                            document = make_document(exp=exp, edu=edu, cert=cert)
                            pages = build_continuation_pages(document, profile)

                            self.assertEqual(estimate_continuation_pages(document, profile), len(pages))

                            rebuilt = {section: list(items) for section, items in first_page_slices(document, profile).items()}
                            for page in pages:
                                self.assertTrue(
                                    page.show_experience or page.show_education or page.show_certificates
                                )
                                for section, items in page.slices(document, profile).items():
                                    rebuilt[section].extend(items)

                            for section in SECTIONS:
                                self.assertEqual(rebuilt[section], list(getattr(document, section)))

    def test_pagination_is_idempotent(self) -> None:
        document = make_document(exp=17, edu=6, cert=9)

        self.assertEqual(build_continuation_pages(document, LETTER), build_continuation_pages(document, LETTER))


class GalleryPaginationTests(unittest.TestCase):
    def test_chunks_valid_items_into_fixed_pages(self) -> None:
        pages = paginate_gallery(make_gallery(7), LETTER)

        self.assertEqual([len(page) for page in pages], [4, 3])
        self.assertEqual([item.id for page in pages for item in page.items], [f"g-{i}" for i in range(7)])

    def test_invalid_items_are_excluded(self) -> None:
        pages = paginate_gallery(make_gallery(5, missing_image=(1, 3)), LETTER)

        self.assertEqual(len(pages), 1)
        self.assertEqual([item.id for item in pages[0].items], ["g-0", "g-2", "g-4"])

    def test_whitespace_fields_count_as_present(self) -> None:
        items = [
            GalleryItem(id="a", project_name=" ", image="a.png"),
            GalleryItem(id="b", project_name="B", image=""),
            GalleryItem(id="c", project_name="", image="c.png"),
        ]

        pages = paginate_gallery(items, LETTER)

        self.assertEqual([[item.id for item in page.items] for page in pages], [["a"]])

    def test_no_valid_items_yields_no_pages(self) -> None:
        self.assertEqual(paginate_gallery([], A4), [])
        self.assertEqual(paginate_gallery(make_gallery(3, missing_name=(0, 1, 2)), A4), [])

    def test_page_totals_match_valid_item_count(self) -> None:
        for count in range(0, 20):
            with self.subTest(count=count):
                items = make_gallery(count, missing_image=range(0, count, 4))
                valid = [item for item in items if item.is_valid]
                pages = paginate_gallery(items, A4)

                self.assertEqual(sum(len(page) for page in pages), len(valid))
                for page in pages[:-1]:
                    self.assertEqual(len(page), A4.gallery_per_page)


class PagePlanTests(unittest.TestCase):
    def test_gallery_ordinals_follow_continuation_pages(self) -> None:
        document = make_document(exp=10, gallery=make_gallery(7))
        plan = plan_document(document, PaperSize.LETTER)

        self.assertEqual(len(plan.continuation_pages), 2)
        self.assertEqual([plan.continuation_ordinal(i) for i in range(2)], [2, 3])
        self.assertEqual([plan.gallery_ordinal(i) for i in range(len(plan.gallery_pages))], [4, 5])
        self.assertEqual(plan.total_pages, 5)
        self.assertEqual(estimate_page_count(document, LETTER), plan.total_pages)

    def test_page_count_takes_gallery_pages_from_gallery_paginator(self) -> None:
        document = make_document(exp=2, gallery=make_gallery(5))

        with patch("resume_pages.pagination.paginate_gallery", wraps=paginate_gallery) as gallery:
            total = estimate_page_count(document, LETTER)

        gallery.assert_called_once_with(document.gallery, LETTER)
        self.assertEqual(total, 1 + 0 + 2)

    def test_labels_only_number_pages_when_there_are_several(self) -> None:
        single = plan_document(make_document(exp=10, gallery=make_gallery(2)), PaperSize.A4)
        several = plan_document(make_document(exp=20, gallery=make_gallery(7)), PaperSize.A4)

        self.assertIsNone(single.continuation_label(0))
        self.assertIsNone(single.gallery_label(0))
        self.assertEqual(several.continuation_label(1), "Cont. 2")
        self.assertEqual(several.gallery_label(1), "Portfolio (2)")

    def test_plan_accepts_paper_size_names(self) -> None:
        plan = plan_document(make_document(exp=5), "Letter")

        self.assertEqual(plan.profile.paper_size, PaperSize.LETTER)

    def test_to_dict_describes_every_page(self) -> None:
        plan = plan_document(make_document(exp=5, edu=1, gallery=make_gallery(1)), PaperSize.A4)
        summary = plan.to_dict()

        self.assertEqual(summary["paper_size"], "a4")
        self.assertEqual(summary["total_pages"], 3)
        self.assertEqual(summary["first_page"]["experience"], ["exp-0", "exp-1", "exp-2", "exp-3"])
        self.assertEqual(summary["first_page"]["education"], ["edu-0"])
        self.assertEqual(summary["continuation_pages"][0]["ordinal"], 2)
        self.assertEqual(summary["continuation_pages"][0]["experience_start"], 4)
        self.assertEqual(summary["gallery_pages"][0], {"ordinal": 3, "label": None, "items": ["g-0"]})

    def test_plans_are_structurally_equal_across_calls(self) -> None:
        document = make_document(exp=9, cert=8, gallery=make_gallery(9))

        self.assertEqual(plan_document(document, PaperSize.A4), plan_document(document, PaperSize.A4))


if __name__ == "__main__":
    unittest.main()
