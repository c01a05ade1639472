import os
import unittest

# Keep API tests deterministic: never reach a remote provider.
os.environ["INSIGHT_PROVIDER"] = "none"

import samples

from fastapi.testclient import TestClient

from main import app


class ApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "online")

    def test_analyze(self):
        response = self.client.post("/analyze", json={"resume_text": samples.SOFTWARE_ENGINEER})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(len(body["sections"]), 6)
        self.assertIn(body["overall"]["grade"], {"A+", "A", "A-", "B+", "B", "B-", "C+", "C", "C-", "D"})
        self.assertNotIn("ai", body)

    def test_analyze_with_insights_uses_local_fallback(self):
        response = self.client.post(
            "/analyze", json={"resume_text": samples.SOFTWARE_ENGINEER, "enrich": True}
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["ai"]["source"], "enhanced_local")
        self.assertEqual(body["enrichment_state"], "fell_back_to_local")

    def test_empty_text_rejected(self):
        response = self.client.post("/analyze", json={"resume_text": "   "})
        self.assertEqual(response.status_code, 400)

    def test_short_text_rejected(self):
        response = self.client.post("/analyze", json={"resume_text": "Python developer"})
        self.assertEqual(response.status_code, 400)

    def test_batch(self):
        response = self.client.post("/analyze/batch", json={"resumes": [
            {"label": "a", "resume_text": samples.SCENARIO_A},
            {"label": "b", "resume_text": ""},
        ]})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([item["success"] for item in response.json()], [True, False])

    def test_batch_applies_analyze_validation_per_entry(self):
        response = self.client.post("/analyze/batch", json={"resumes": [
            {"label": "huge", "resume_text": "word " * 17000},
            {"label": "short", "resume_text": "Python developer"},
            {"label": "ok", "resume_text": samples.SOFTWARE_ENGINEER},
        ]})
        self.assertEqual(response.status_code, 200)
        items = response.json()
        self.assertEqual([item["success"] for item in items], [False, False, True])
        self.assertIn("maximum length", items[0]["error"])
        self.assertIn("too short", items[1]["error"])
        self.assertIsNone(items[0]["result"])

    def test_batch_size_capped(self):
        entries = [{"label": str(i), "resume_text": samples.SCENARIO_A} for i in range(21)]
        response = self.client.post("/analyze/batch", json={"resumes": entries})
        self.assertEqual(response.status_code, 400)

    def test_compare(self):
        response = self.client.post("/compare", json={
            "first_text": samples.SCENARIO_A,
            "second_text": samples.SOFTWARE_ENGINEER,
        })
        self.assertEqual(response.status_code, 200)
        self.assertIn("difference", response.json()["scores"])

    def test_stats(self):
        response = self.client.post("/stats", json={"resume_text": samples.FILLER_1200})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["word_count"], 1200)


if __name__ == "__main__":
    unittest.main()
