import json
import unittest

import samples

from resume_engine import EmptyInputError
from resume_engine.analyzer import (analysis_stats, analyze_many,
                                    analyze_resume, compare_analyses,
                                    export_analysis, normalize_text,
                                    run_analysis)
from resume_engine.config import InsightConfig
from resume_engine.models import EnrichedResult


class RunAnalysisTests(unittest.TestCase):
    def test_scenario_a(self):
        result = run_analysis(samples.SCENARIO_A)

        self.assertTrue(result.sections["contact"].present)
        self.assertNotIn("Add Email Address", [r.title for r in result.recommendations])
        self.assertGreater(result.skills.total, 0)
        self.assertTrue(any(i.priority in ("high", "medium") for i in result.overall.improvements))
        for name in ("summary", "education", "projects"):
            self.assertFalse(result.sections[name].present)

    def test_scenario_b_empty_text(self):
        with self.assertRaises(EmptyInputError):
            run_analysis("")

    def test_near_empty_text(self):
        with self.assertRaises(EmptyInputError):
            run_analysis("   short   ")

    def test_scenario_c(self):
        result = run_analysis(samples.FILLER_1200)
        titles = [r.title for r in result.recommendations]

        self.assertEqual(titles[0], "Add Email Address")
        self.assertIn("Condense Resume Content", titles)
        self.assertIn("Quantify Achievements", titles)
        self.assertEqual(result.overall.breakdown.content, 35)
        self.assertEqual(result.overall.breakdown.completeness, 0)

    def test_metadata(self):
        result = run_analysis(" ".join(["word"] * 401))
        self.assertEqual(result.metadata.word_count, 401)
        self.assertEqual(result.metadata.character_count, 401 * 5 - 1)
        self.assertEqual(result.metadata.estimated_read_time, 3)
        self.assertTrue(result.metadata.analyzed_at)

    def test_idempotent_apart_from_timestamp(self):
        first = run_analysis(samples.SOFTWARE_ENGINEER)
        second = run_analysis(samples.SOFTWARE_ENGINEER)
        for field in ("overall", "sections", "skills", "recommendations"):
            self.assertEqual(getattr(first, field), getattr(second, field))

    def test_skills_total_invariant(self):
        skills = run_analysis(samples.SOFTWARE_ENGINEER).skills
        self.assertEqual(skills.total, len(skills.technical) + len(skills.soft) + len(skills.industry))

    def test_result_is_immutable(self):
        result = run_analysis(samples.SCENARIO_A)
        with self.assertRaises(Exception):
            result.overall = None


class AnalyzeResumeTests(unittest.TestCase):
    def test_without_insights(self):
        result = analyze_resume(samples.SCENARIO_A)
        self.assertNotIsInstance(result, EnrichedResult)

    def test_with_local_insights(self):
        config = InsightConfig(provider="none", api_key=None, model="test-model")
        result = analyze_resume(samples.SCENARIO_A, with_insights=True, config=config)
        self.assertIsInstance(result, EnrichedResult)
        self.assertEqual(result.ai.source, "enhanced_local")


class SupplementaryOperationTests(unittest.TestCase):
    def test_normalize_text(self):
        self.assertEqual(normalize_text("  a\n\n b\tc\x07 "), "a b c")
        self.assertEqual(normalize_text(None), "")

    def test_analyze_many_keeps_going(self):
        items = analyze_many([("good", samples.SCENARIO_A), ("empty", ""), ("also", samples.FILLER_1200)])

        self.assertEqual([i.success for i in items], [True, False, True])
        self.assertIsNone(items[1].result)
        self.assertEqual(items[1].error, "No text content found in resume")

    def test_compare_analyses(self):
        first = run_analysis(samples.SCENARIO_A)
        second = run_analysis(samples.SOFTWARE_ENGINEER)

        comparison = compare_analyses(first, second)

        self.assertEqual(comparison.scores.difference, second.overall.score - first.overall.score)
        self.assertEqual(set(comparison.breakdown), {"content", "structure", "keywords", "completeness"})
        self.assertEqual(comparison.breakdown["content"].first, first.overall.breakdown.content)

    def test_analysis_stats(self):
        result = run_analysis(samples.FILLER_1200)
        stats = analysis_stats(result)
        self.assertEqual(stats.word_count, 1200)
        self.assertEqual(stats.reading_time, 6)
        self.assertEqual(stats.recommendations_count, 6)

    def test_export_analysis(self):
        exported = json.loads(export_analysis(run_analysis(samples.SCENARIO_A), "a.pdf"))
        self.assertEqual(exported["file_name"], "a.pdf")
        self.assertEqual(exported["format"], "json")
        self.assertEqual(exported["analysis"]["overall"]["score"], 37)


if __name__ == "__main__":
    unittest.main()
