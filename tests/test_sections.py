import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.parsing.sections import (  # noqa: E402
    SectionSegmenter,
    match_section_header,
    segment_sections,
)


class SectionSegmenterTests(unittest.TestCase):
    def test_blocks_are_recorded_with_line_ranges(self):
        text = "Jane Doe\njane@x.com\nSUMMARY\nBuilder.\nEXPERIENCE\nAcme\nEDUCATION\nState University"
        sections = segment_sections(text)

        self.assertEqual(list(sections), ["HEADER", "SUMMARY", "EXPERIENCE", "EDUCATION"])
        self.assertEqual(sections["HEADER"].content, "Jane Doe\njane@x.com")
        self.assertEqual((sections["HEADER"].start, sections["HEADER"].end), (0, 1))
        self.assertEqual((sections["SUMMARY"].start, sections["SUMMARY"].end), (2, 3))
        self.assertEqual(sections["EDUCATION"].content, "State University")

    def test_text_without_headers_is_unsegmented(self):
        self.assertEqual(segment_sections("Just some text\nwithout sections"), {})
        self.assertEqual(segment_sections(""), {})

    def test_header_variants(self):
        self.assertEqual(match_section_header("Skills:"), "SKILLS")
        self.assertEqual(match_section_header("Professional Summary"), "SUMMARY")
        self.assertEqual(match_section_header("Employment History"), "EXPERIENCE")
        self.assertEqual(match_section_header("Licenses & Certifications"), "CERTIFICATIONS")
        self.assertIsNone(match_section_header("Built internal tools"))

    def test_soft_cues_only_fire_for_short_header_like_lines(self):
        self.assertEqual(match_section_header("RELEVANT WORK EXPERIENCE"), "EXPERIENCE")
        self.assertEqual(match_section_header("EDUCATION & EXPERIENCE"), "EDUCATION")
        self.assertIsNone(match_section_header("I gained a lot of experience working with customers."))
        self.assertIsNone(match_section_header("Customer experience lead"))

    def test_repeated_section_merges_into_first_block(self):
        sections = segment_sections("SKILLS\nPython\nEXPERIENCE\nAcme\nSKILLS\nDocker")
        self.assertEqual(list(sections), ["SKILLS", "EXPERIENCE"])
        self.assertEqual(sections["SKILLS"].content, "Python\nDocker")
        self.assertEqual((sections["SKILLS"].start, sections["SKILLS"].end), (0, 5))

    def test_state_machine_leaves_preamble_on_first_header(self):
        segmenter = SectionSegmenter()
        self.assertTrue(segmenter.in_preamble)
        segmenter.feed(0, "Jane Doe")
        self.assertTrue(segmenter.in_preamble)
        segmenter.feed(1, "EXPERIENCE")
        self.assertFalse(segmenter.in_preamble)
        sections = segmenter.finish(1)
        self.assertEqual(sections["HEADER"].content, "Jane Doe")
        self.assertEqual(sections["EXPERIENCE"].content, "")


if __name__ == "__main__":
    unittest.main()
