import unittest

import samples

from resume_engine.models import PRIORITY_RANK
from resume_engine.recommendations import recommend

CLEAN = (
    "Summary john@x.com python java docker aws coaching increased revenue 25% "
    + " ".join(["alpha"] * 300)
)


def _titles(text):
    return [r.title for r in recommend(text)]


class RecommendationRuleTests(unittest.TestCase):
    def test_clean_resume_gets_nothing(self):
        self.assertEqual(recommend(CLEAN), [])

    def test_short_resume_expand(self):
        text = CLEAN.replace(" ".join(["alpha"] * 300), "alpha")
        rec = recommend(text)[0]
        self.assertEqual((rec.type, rec.priority, rec.title), ("content", "high", "Expand Resume Content"))

    def test_length_rules_are_exclusive(self):
        at_limit = CLEAN + " " + " ".join(["alpha"] * (1000 - len(CLEAN.split())))
        self.assertEqual(len(at_limit.split()), 1000)
        self.assertEqual(_titles(at_limit), [])

        over = at_limit + " alpha"
        self.assertEqual(_titles(over), ["Condense Resume Content"])

    def test_missing_email_is_critical(self):
        recs = recommend(CLEAN.replace("john@x.com", "john at x"))
        self.assertEqual([(r.type, r.priority) for r in recs], [("contact", "critical")])

    def test_missing_summary_word(self):
        recs = recommend(CLEAN.replace("Summary", "Header"))
        self.assertEqual([(r.type, r.priority) for r in recs], [("structure", "medium")])

    def test_no_action_words(self):
        recs = recommend(CLEAN.replace("increased", "grew"))
        self.assertEqual([r.title for r in recs], ["Use Action Words"])

    def test_currency_and_magnitude_count_as_quantified(self):
        for figure in ("$500", "5 million", "10k"):
            with self.subTest(figure=figure):
                text = CLEAN.replace("25%", figure)
                self.assertNotIn("Quantify Achievements", _titles(text))

    def test_unquantified_resume_flagged(self):
        recs = recommend(CLEAN.replace("25%", "a lot"))
        self.assertEqual([(r.type, r.priority, r.title) for r in recs],
                         [("impact", "high", "Quantify Achievements")])


class RecommendationOrderingTests(unittest.TestCase):
    def test_scenario_a(self):
        titles = _titles(samples.SCENARIO_A)
        self.assertNotIn("Add Email Address", titles)
        self.assertEqual(titles, ["Expand Resume Content", "Add Professional Summary"])

    def test_scenario_c_ordering(self):
        titles = _titles(samples.FILLER_1200)
        self.assertEqual(titles, [
            "Add Email Address",
            "Add More Skills",
            "Quantify Achievements",
            "Condense Resume Content",
            "Use Action Words",
            "Add Professional Summary",
        ])

    def test_sorted_by_descending_priority(self):
        for text in ("", samples.SCENARIO_A, samples.FILLER_1200, samples.SOFTWARE_ENGINEER):
            ranks = [PRIORITY_RANK[r.priority] for r in recommend(text)]
            self.assertEqual(ranks, sorted(ranks, reverse=True))


if __name__ == "__main__":
    unittest.main()
