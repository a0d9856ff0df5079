import random
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine import parse_resume_text  # noqa: E402
from resume_engine.enhance import ContentEnhancer  # noqa: E402
from resume_engine.features import detect_industry  # noqa: E402
from resume_engine.features.industry_detector import (  # noqa: E402
    detect_industry_from_text,
    score_industries,
)
from resume_engine.schemas.keywords import IndustryKeywords, KeywordSearchResult  # noqa: E402
from resume_engine.schemas.resume import ParseResult, Skill, WorkExperience  # noqa: E402
from resume_engine.taxonomy import KeywordBank, get_default_keyword_bank  # noqa: E402


def _widget_industry():
    return {
        "action_verbs": ["assembled"],
        "skills": [],
        "responsibilities": [],
        "achievement_templates": [],
        "certifications": [],
        "tools": [],
        "metrics": [],
        "cues": ["widget"],
    }


class _WidgetOnlyBank:
    """Keyword source with a single industry, written against the provider protocol only."""

    templates = ()

    def __init__(self):
        self._keywords = IndustryKeywords(**_widget_industry())

    @property
    def casual_phrases(self):
        return {}

    def get_industry(self, name):
        return self._keywords if name == "widgets" else None

    def list_industries(self):
        return ["widgets"]

    def items(self):
        return iter([("widgets", self._keywords)])

    def search_keywords(self, query, industry=None):
        return KeywordSearchResult()

    def get_quantification_suggestions(self, industry):
        return {}


class IndustryDetectorTests(unittest.TestCase):
    def test_plumbing_resume(self):
        result = ParseResult(
            experience=[
                WorkExperience(
                    company_name="Rapid Plumbing Co",
                    job_title="Journeyman Plumber",
                    achievements=["Performed leak detection on commercial buildings"],
                )
            ],
            skills=[Skill(name="Pipe Fitting")],
        )
        self.assertEqual(detect_industry(result), "plumbing")
        scores = score_industries(result)
        self.assertEqual(set(scores), set(get_default_keyword_bank().list_industries()))
        self.assertEqual(scores["plumbing"], 6)

    def test_no_signal_is_general(self):
        self.assertEqual(detect_industry(ParseResult()), "general")

    def test_ties_resolve_in_bank_order(self):
        result = ParseResult(experience=[WorkExperience(company_name="Widget Works", job_title="Widget Assembler")])
        forward = KeywordBank.from_mapping({"industries": {"alpha": _widget_industry(), "beta": _widget_industry()}})
        backward = KeywordBank.from_mapping({"industries": {"beta": _widget_industry(), "alpha": _widget_industry()}})
        self.assertEqual(detect_industry(result, forward), "alpha")
        self.assertEqual(detect_industry(result, backward), "beta")

    def test_free_text_detection(self):
        self.assertEqual(detect_industry_from_text("Installed HVAC systems and refrigeration units"), "hvac")
        self.assertEqual(detect_industry_from_text("Enjoyed a quiet afternoon"), "general")


class KeywordBankProviderTests(unittest.TestCase):
    def setUp(self):
        self.bank = _WidgetOnlyBank()

    def test_detection_accepts_any_provider(self):
        result = ParseResult(experience=[WorkExperience(company_name="Widget Works", job_title="Assembler")])
        self.assertEqual(score_industries(result, self.bank), {"widgets": 3})
        self.assertEqual(detect_industry(result, self.bank), "widgets")
        self.assertEqual(detect_industry_from_text("Sorted widget parts", self.bank), "widgets")

    def test_parse_and_enhance_accept_any_provider(self):
        parsed = parse_resume_text(
            "Jane Doe\nEXPERIENCE\nWidget Works Inc - Line Operator - 2019 - 2021\n"
            "• Sorted parts for the assembly line",
            keyword_bank=self.bank,
        )
        self.assertEqual(parsed.detected_industry, "widgets")

        enhanced = ContentEnhancer(self.bank, rng=random.Random(3)).enhance("Sorted parts by hand", "widgets")
        self.assertEqual(enhanced.industry, "widgets")
        self.assertEqual(enhanced.suggestions.action_verbs, ["assembled"])
        self.assertTrue(enhanced.enhanced_text.startswith("Sorted parts by hand"))


if __name__ == "__main__":
    unittest.main()
