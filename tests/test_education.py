import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.extractors.education import extract_education, find_degree  # noqa: E402
from resume_engine.parsing import build_parsed_document  # noqa: E402
from resume_engine.schemas.resume import (  # noqa: E402
    PLACEHOLDER_DEGREE,
    PLACEHOLDER_EDUCATION_ACHIEVEMENT,
    PLACEHOLDER_MAJOR,
    WorkExperience,
)


def _education(text: str, experience=None):
    return extract_education(build_parsed_document(text), experience)


class EducationExtractionTests(unittest.TestCase):
    def test_institution_degree_year_and_gpa(self):
        entries = _education(
            "EDUCATION\nStanford University\nBachelor of Science in Computer Science, 2018\nGPA: 3.8"
        )
        self.assertEqual(len(entries), 1)
        entry = entries[0]
        self.assertEqual(entry.institution, "Stanford University")
        self.assertEqual(entry.degree, "Bachelor of Science")
        self.assertEqual(entry.major, "Computer Science")
        self.assertEqual(entry.graduation_date, "2018")
        self.assertEqual(entry.gpa, "3.8")
        self.assertEqual(entry.achievements, [PLACEHOLDER_EDUCATION_ACHIEVEMENT])

    def test_abbreviated_degree_on_institution_line(self):
        entries = _education(
            "EDUCATION\nB.S. in Mechanical Engineering - Georgia Institute of Technology, 2015"
        )
        self.assertEqual(entries[0].institution, "Georgia Institute of Technology")
        self.assertEqual(entries[0].degree, "B.S.")
        self.assertEqual(entries[0].major, "Mechanical Engineering")
        self.assertEqual(entries[0].graduation_date, "2015")

    def test_experience_companies_are_not_institutions(self):
        experience = [WorkExperience(company_name="Coding Academy", job_title="Instructor")]
        entries = _education("EDUCATION\nCoding Academy\nState University\nBA History 2012", experience)
        self.assertEqual([entry.institution for entry in entries], ["State University"])
        self.assertEqual((entries[0].degree, entries[0].major), ("BA", "History"))

    def test_blocklisted_phrases_are_rejected(self):
        self.assertEqual(_education("EDUCATION\nCurrent College Student at Lakeside College"), [])

    def test_repeated_institutions_are_deduplicated(self):
        entries = _education("EDUCATION\nState University\nB.S. Biology\nState University\nM.S. Chemistry")
        self.assertEqual(len(entries), 1)
        self.assertEqual((entries[0].degree, entries[0].major), ("B.S.", "Biology"))

    def test_degree_without_institution_in_education_section(self):
        entries = _education("EDUCATION\nMaster of Business Administration, 2020")
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].institution, "")
        self.assertEqual(entries[0].degree, "Master of Business Administration")
        self.assertEqual(entries[0].major, PLACEHOLDER_MAJOR)
        self.assertEqual(entries[0].graduation_date, "2020")

    def test_each_school_keeps_its_own_degree_and_year(self):
        entries = _education(
            "Jane Doe\nEDUCATION\nHarvard University\nBA in Economics, 2010\nStanford University\nMBA, 2014"
        )
        self.assertEqual(
            [(entry.institution, entry.degree, entry.major, entry.graduation_date) for entry in entries],
            [
                ("Harvard University", "BA", "Economics", "2010"),
                ("Stanford University", "MBA", PLACEHOLDER_MAJOR, "2014"),
            ],
        )

    def test_school_without_degree_does_not_borrow_from_previous_school(self):
        entries = _education("EDUCATION\nState University\nB.S. Biology, 2012\nLakeside College")
        self.assertEqual([entry.institution for entry in entries], ["State University", "Lakeside College"])
        self.assertEqual((entries[1].degree, entries[1].graduation_date), (PLACEHOLDER_DEGREE, None))

    def test_degree_line_above_a_lone_institution(self):
        entries = _education("EDUCATION\nBachelor of Arts in History, 2012\nState College")
        self.assertEqual(entries[0].institution, "State College")
        self.assertEqual((entries[0].degree, entries[0].major), ("Bachelor of Arts", "History"))
        self.assertEqual(entries[0].graduation_date, "2012")

    def test_campus_names_stay_attached_to_institution(self):
        entries = _education(
            "EDUCATION\nUniversity of Texas at Austin\nUniversity of Michigan - Ann Arbor\n"
            "Stanford University - B.S. Computer Science"
        )
        self.assertEqual(
            [entry.institution for entry in entries],
            ["University of Texas at Austin", "University of Michigan - Ann Arbor", "Stanford University"],
        )
        self.assertEqual((entries[2].degree, entries[2].major), ("B.S.", "Computer Science"))

    def test_find_degree_returns_none_without_degree(self):
        self.assertIsNone(find_degree("Volunteered at the library"))


if __name__ == "__main__":
    unittest.main()
