import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pydantic import ValidationError  # noqa: E402

from resume_engine import search_keywords  # noqa: E402
from resume_engine.taxonomy import KeywordBank, get_default_keyword_bank  # noqa: E402


def _industry(**overrides):
    data = {
        "action_verbs": ["verified"],
        "skills": ["regression testing"],
        "responsibilities": [],
        "achievement_templates": [],
        "certifications": [],
        "tools": ["test harness"],
        "metrics": [],
    }
    data.update(overrides)
    return data


class KeywordBankTests(unittest.TestCase):
    def test_default_bank_industries_in_tie_break_order(self):
        bank = get_default_keyword_bank()
        self.assertEqual(
            bank.list_industries(),
            [
                "technology",
                "healthcare",
                "finance",
                "sales",
                "plumbing",
                "customer-service",
                "hvac",
                "electrical",
                "construction",
            ],
        )
        self.assertIsNotNone(bank.get_industry("Plumbing"))
        self.assertIsNone(bank.get_industry("astrology"))
        self.assertEqual(len(bank.templates), 4)

    def test_search_wire_in_electrical(self):
        result = search_keywords("wire", "electrical")
        self.assertIn("wired", result.action_verbs)
        self.assertIn("wire strippers", result.tools)

    def test_search_dedupes_and_caps_across_industries(self):
        bank = get_default_keyword_bank()
        self.assertEqual(bank.search_keywords("install").action_verbs.count("installed"), 1)

        broad = bank.search_keywords("e")
        self.assertLessEqual(len(broad.action_verbs), 10)
        self.assertLessEqual(len(broad.skills), 15)
        self.assertLessEqual(len(broad.tools), 10)

    def test_search_edge_cases(self):
        bank = get_default_keyword_bank()
        empty = bank.search_keywords("   ")
        self.assertEqual((empty.action_verbs, empty.skills, empty.tools), ([], [], []))
        unknown = bank.search_keywords("wire", "astrology")
        self.assertEqual((unknown.action_verbs, unknown.skills, unknown.tools), ([], [], []))

    def test_quantification_suggestions_fall_back_to_general(self):
        bank = get_default_keyword_bank()
        self.assertEqual(bank.get_quantification_suggestions("plumbing")["calls"], ["8-12", "10-15", "15-20"])
        self.assertEqual(set(bank.get_quantification_suggestions("astrology")), {"general", "projects"})

    def test_reduced_bank_from_mapping(self):
        bank = KeywordBank.from_mapping({"industries": {"Testing": _industry()}})
        self.assertEqual(bank.list_industries(), ["testing"])
        self.assertEqual(bank.search_keywords("test").tools, ["test harness"])
        self.assertEqual(bank.templates, ())
        self.assertEqual(bank.casual_phrases, {})

    def test_invalid_bank_data_is_rejected(self):
        with self.assertRaises(ValueError):
            KeywordBank.from_mapping({"industries": {"testing": _industry(action_verbs=[])}})
        with self.assertRaises(ValueError):
            KeywordBank.from_mapping({"industries": ["not", "a", "mapping"]})
        with self.assertRaises(ValueError):
            KeywordBank.from_mapping(
                {
                    "industries": {
                        "testing": _industry(
                            context_rules=[{"triggers": ["x"], "action": "replace", "text": "y", "improvement": "z"}]
                        )
                    }
                }
            )

    def test_keywords_are_immutable(self):
        keywords = get_default_keyword_bank().get_industry("electrical")
        self.assertIsInstance(keywords.action_verbs, tuple)
        with self.assertRaises(ValidationError):
            keywords.trade = False


if __name__ == "__main__":
    unittest.main()
