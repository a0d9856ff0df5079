import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.extractors.personal import (  # noqa: E402
    extract_email,
    extract_linkedin,
    extract_location,
    extract_personal_info,
    extract_phone,
    extract_portfolio,
)
from resume_engine.parsing import build_parsed_document  # noqa: E402


class PersonalInfoTests(unittest.TestCase):
    def test_contact_block(self):
        doc = build_parsed_document(
            "Jane Doe\njane.doe@example.com\n555-123-4567\nEXPERIENCE\nSoftware Engineer at Acme Inc - 2019-2022"
        )
        personal = extract_personal_info(doc)
        self.assertEqual(personal.full_name, "Jane Doe")
        self.assertEqual(personal.email, "jane.doe@example.com")
        self.assertEqual(personal.phone, "555-123-4567")

    def test_name_skips_resume_metadata_and_titles(self):
        doc = build_parsed_document("Resume\nCurriculum Vitae\nJohn Smith\njohn@example.com")
        self.assertEqual(extract_personal_info(doc).full_name, "John Smith")

        doc = build_parsed_document("SENIOR SOFTWARE ENGINEER\nMaria Garcia\nmaria@example.com")
        self.assertEqual(extract_personal_info(doc).full_name, "Maria Garcia")

    def test_email_must_validate(self):
        self.assertEqual(extract_email("contact: bad@mail, real.person@mail.org"), "real.person@mail.org")
        self.assertIsNone(extract_email("no address here"))

    def test_phone_formats_in_priority_order(self):
        self.assertEqual(extract_phone("Call +1 (555) 123-4567 today"), "+1 (555) 123-4567")
        self.assertEqual(extract_phone("(555) 987-6543"), "(555) 987-6543")
        self.assertEqual(extract_phone("555.987.6543"), "555.987.6543")
        self.assertEqual(extract_phone("555 987 6543"), "555 987 6543")
        self.assertEqual(extract_phone("5559876543"), "5559876543")
        self.assertIsNone(extract_phone("2019-2022"))

    def test_linkedin_is_normalized_and_validated(self):
        self.assertEqual(extract_linkedin("www.linkedin.com/in/jane-doe/"), "https://linkedin.com/in/jane-doe")
        self.assertIsNone(extract_linkedin("linkedin.com/in/ab"))
        self.assertIsNone(extract_linkedin("linkedin.com/in/jane@mail.com"))

    def test_portfolio_ignores_linkedin_and_email_domains(self):
        text = "Jane Doe\njane.doe@example.com\nlinkedin.com/in/janedoe\nhttps://janedoe.dev"
        self.assertEqual(extract_portfolio(text, text), "https://janedoe.dev")

        header = "Jane Doe | janedoe.io | jane@example.com"
        self.assertEqual(extract_portfolio(header, header), "janedoe.io")

    def test_location_patterns(self):
        self.assertEqual(extract_location("Location: Denver, CO"), "Denver, CO")
        self.assertEqual(extract_location("Austin, TX 78701"), "Austin, TX 78701")
        self.assertEqual(extract_location("Seattle, WA | 555-123-4567"), "Seattle, WA")
        self.assertIsNone(extract_location("no location"))


if __name__ == "__main__":
    unittest.main()
