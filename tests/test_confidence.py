import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.features import calculate_confidence, generate_suggestions  # noqa: E402
from resume_engine.features.confidence import score_components  # noqa: E402
from resume_engine.schemas.resume import (  # noqa: E402
    Education,
    ParseResult,
    PersonalInfo,
    Skill,
    WorkExperience,
)


def _skills(count: int) -> list[Skill]:
    return [Skill(name=f"Skill {index}") for index in range(count)]


def _complete_result() -> ParseResult:
    return ParseResult(
        personal=PersonalInfo(full_name="Jane Doe", email="jane@example.com", phone="555-123-4567"),
        experience=[
            WorkExperience(company_name="Acme Inc", job_title="Engineer", achievements=["Built internal tools"])
        ],
        education=[Education(institution="State University")],
        skills=_skills(5),
    )


class ConfidenceTests(unittest.TestCase):
    def test_empty_result_scores_zero(self):
        self.assertEqual(calculate_confidence(ParseResult()), 0.0)

    def test_complete_result_scores_one(self):
        self.assertEqual(calculate_confidence(_complete_result()), 1.0)

    def test_adding_a_field_never_lowers_the_score(self):
        base = ParseResult()
        with_email = ParseResult(personal=PersonalInfo(email="jane@example.com"))
        self.assertGreater(calculate_confidence(with_email), calculate_confidence(base))
        self.assertEqual(calculate_confidence(with_email), 0.1)

    def test_placeholder_achievements_lose_achievement_points(self):
        result = _complete_result()
        result.experience = [WorkExperience(company_name="Acme Inc", job_title="Engineer")]
        self.assertEqual(calculate_confidence(result), 0.8)

    def test_partial_skill_credit(self):
        self.assertEqual(calculate_confidence(ParseResult(skills=_skills(2))), 0.06)
        self.assertEqual(score_components(ParseResult(skills=_skills(9)))["skills"], 15.0)


class SuggestionTests(unittest.TestCase):
    def test_empty_result_suggestions_in_order(self):
        self.assertEqual(
            generate_suggestions(ParseResult(), limit=5),
            [
                "Add your full name at the top of the resume",
                "Add a professional email address",
                "Add your work history with specific achievements",
                "Add your educational background",
                "Add more skills (at least 5 recommended)",
            ],
        )

    def test_placeholder_entries_are_named(self):
        result = ParseResult(
            personal=PersonalInfo(full_name="Jane Doe", email="jane@example.com"),
            experience=[WorkExperience(company_name="Acme Inc", job_title="Analyst")],
        )
        self.assertEqual(
            generate_suggestions(result, limit=5),
            [
                "Add specific achievements for Acme Inc",
                "Add your educational background",
                "Add more skills (at least 5 recommended)",
            ],
        )

    def test_list_is_capped(self):
        result = ParseResult(
            experience=[
                WorkExperience(company_name=f"Company {index}", job_title="Analyst") for index in range(3)
            ]
        )
        suggestions = generate_suggestions(result, limit=5)
        self.assertEqual(len(suggestions), 5)
        self.assertEqual(suggestions[-1], "Add specific achievements for Company 2")

    def test_complete_result_needs_no_suggestions(self):
        self.assertEqual(generate_suggestions(_complete_result()), [])


if __name__ == "__main__":
    unittest.main()
