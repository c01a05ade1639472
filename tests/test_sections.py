import unittest

import samples

from resume_engine.sections import detect_sections


class SectionDetectorTests(unittest.TestCase):
    def test_always_six_sections(self):
        for text in ("", "hello", samples.SOFTWARE_ENGINEER):
            sections = detect_sections(text)
            self.assertEqual(
                list(sections),
                ["contact", "summary", "experience", "education", "skills", "projects"],
            )

    def test_absent_section_is_a_value(self):
        report = detect_sections("")["education"]
        self.assertFalse(report.present)
        self.assertEqual(report.score, 0)
        self.assertEqual(report.suggestions, ["Add a education section to your resume"])

    def test_present_section(self):
        report = detect_sections("EDUCATION: BSc, State University")["education"]
        self.assertTrue(report.present)
        self.assertEqual(report.score, 100)
        self.assertEqual(report.suggestions, [])

    def test_rubric_flags_and_weights(self):
        sections = detect_sections("")
        self.assertFalse(sections["projects"].required)
        self.assertTrue(sections["experience"].required)
        self.assertEqual(sections["experience"].weight, 0.35)
        self.assertAlmostEqual(sum(s.weight for s in sections.values()), 1.0)

    def test_scenario_a_contact_detected(self):
        sections = detect_sections(samples.SCENARIO_A)
        self.assertTrue(sections["contact"].present)
        self.assertFalse(sections["summary"].present)
        self.assertFalse(sections["education"].present)
        self.assertFalse(sections["projects"].present)


if __name__ == "__main__":
    unittest.main()
