import asyncio
import random
import string
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_feedback import analyze_resume, analyze_resume_async  # noqa: E402
from resume_feedback.features import build_resume_features  # noqa: E402
from resume_feedback.schemas import AnalysisData  # noqa: E402
from resume_feedback.taxonomy.industries import DEFAULT_TRENDS  # noqa: E402
from resume_samples import KEYWORD_FREE_TEXT, PATHOLOGICAL_TEXTS, STRONG_RESUME_TEXT  # noqa: E402


def _fuzz_corpus() -> list[str]:
    rng = random.Random(20240601)
    alphabet = string.ascii_letters + string.digits + string.punctuation + " \n\t•€é\x00\x9f"
    samples = list(PATHOLOGICAL_TEXTS)
    for length in (1, 7, 50, 400, 3000):
        for _ in range(4):
            samples.append("".join(rng.choice(alphabet) for _ in range(length)))
    samples.append(STRONG_RESUME_TEXT)
    samples.append(KEYWORD_FREE_TEXT)
    return samples


class ScenarioTests(unittest.TestCase):
    def test_strong_resume_scores_well(self):
        features = build_resume_features(STRONG_RESUME_TEXT, "general")
        self.assertTrue(features.education.present)
        self.assertTrue(features.experience.present)
        self.assertTrue(features.achievements.has_achievements)
        self.assertTrue(features.achievements.has_quantifiable_results)

        analysis = analyze_resume(STRONG_RESUME_TEXT)
        self.assertGreater(analysis.overall_score, 70)
        self.assertIn("Quantified accomplishments", [item.text for item in analysis.strengths])

    def test_keyword_free_text_scores_poorly(self):
        analysis = analyze_resume(KEYWORD_FREE_TEXT)
        self.assertLessEqual(analysis.overall_score, 55)
        weakness_texts = [item.text for item in analysis.weaknesses]
        self.assertIn("Missing or unclear education section", weakness_texts)
        self.assertIn("Work experience not clearly defined", weakness_texts)
        self.assertFalse(analysis.ats_analysis.is_parseable)
        self.assertEqual(analysis.ats_analysis.overall_compatibility, "low")

    def test_industry_changes_fit_and_label(self):
        technology = analyze_resume(STRONG_RESUME_TEXT, "technology")
        general = analyze_resume(STRONG_RESUME_TEXT)
        self.assertNotEqual(technology.industry_fit_score, general.industry_fit_score)
        self.assertEqual(technology.industry_analysis.industry, "technology")
        self.assertEqual(general.industry_analysis.industry, "general")
        self.assertIn("python", technology.industry_analysis.relevant_skills)
        self.assertEqual(general.industry_fit_score, 50)

    def test_unknown_industry_uses_general_keywords_and_default_trends(self):
        analysis = analyze_resume(STRONG_RESUME_TEXT, "Agriculture")
        self.assertEqual(analysis.industry_analysis.industry, "agriculture")
        self.assertEqual(analysis.industry_fit_score, 50)
        self.assertEqual(analysis.industry_analysis.industry_trends, DEFAULT_TRENDS[:3])

    def test_trend_list_is_capped_at_three(self):
        for industry in (None, "technology", "finance", "education", "Agriculture"):
            with self.subTest(industry=industry):
                trends = analyze_resume(STRONG_RESUME_TEXT, industry).industry_analysis.industry_trends
                self.assertEqual(len(trends), 3)

    def test_repeated_generic_phrase_is_flagged_as_overused(self):
        text = "I am a team player. " * 5 + KEYWORD_FREE_TEXT
        analysis = analyze_resume(text)
        overused = [term for group in analysis.keyword_suggestions for term in group.overused]
        self.assertIn("team player", overused)

    def test_phrase_used_twice_is_not_overused(self):
        text = "Team player and team player. " + KEYWORD_FREE_TEXT
        analysis = analyze_resume(text)
        overused = [term for group in analysis.keyword_suggestions for term in group.overused]
        self.assertNotIn("team player", overused)

    def test_keyword_suggestion_categories(self):
        analysis = analyze_resume(KEYWORD_FREE_TEXT, "technology")
        categories = [group.category for group in analysis.keyword_suggestions]
        self.assertEqual(categories, ["Technical Skills", "Soft Skills", "Industry Terms"])
        technical, soft, industry_terms = analysis.keyword_suggestions
        self.assertEqual(technical.missing, ("software", "development", "programming"))
        self.assertEqual(industry_terms.missing, ("code", "javascript"))
        self.assertIn("Problem Solving", soft.missing)


class SuggestionRuleTests(unittest.TestCase):
    def test_closing_suggestion_is_always_last(self):
        for text in (STRONG_RESUME_TEXT, KEYWORD_FREE_TEXT, ""):
            suggestions = analyze_resume(text).suggestions
            self.assertEqual(suggestions[-1].title, "Tailor your resume for specific job targets")
            self.assertEqual(suggestions[-1].priority, "medium")

    def test_weak_text_triggers_high_priority_rules(self):
        suggestions = analyze_resume(KEYWORD_FREE_TEXT).suggestions
        titles = {item.title: item.priority for item in suggestions}
        self.assertEqual(titles["Add more measurable achievements"], "high")
        self.assertEqual(titles["Incorporate more industry-specific keywords"], "high")
        self.assertEqual(titles["Optimize for ATS systems"], "high")
        for item in suggestions:
            self.assertTrue(2 <= len(item.examples) <= 3)

    def test_ids_are_sequential_and_unique(self):
        analysis = analyze_resume(KEYWORD_FREE_TEXT)
        ids = [item.id for item in analysis.strengths + analysis.weaknesses + analysis.suggestions]
        self.assertEqual(len(ids), len(set(ids)))
        self.assertEqual(analysis.weaknesses[0].id, "weakness-1")
        self.assertEqual(analysis.suggestions[0].id, "suggestion-1")

    def test_fallback_strength_for_nonsense(self):
        analysis = analyze_resume("zzz")
        self.assertEqual([item.id for item in analysis.strengths], ["strength-default"])
        self.assertGreater(len(analysis.weaknesses), 0)


class InvariantTests(unittest.TestCase):
    def test_invariants_hold_for_fuzzed_inputs(self):
        for index, text in enumerate(_fuzz_corpus()):
            for industry in (None, "technology", "healthcare", "unknown"):
                with self.subTest(sample=index, industry=industry):
                    analysis = analyze_resume(text, industry)
                    self._assert_invariants(analysis)

    def _assert_invariants(self, analysis: AnalysisData):
        for score in (
            analysis.overall_score,
            analysis.relevance_score,
            analysis.keywords_score,
        ):
            self.assertTrue(0 <= score <= 100)
        for score in (
            analysis.readability_score,
            analysis.ats_compatibility_score,
            analysis.industry_fit_score,
        ):
            self.assertTrue(40 <= score <= 100)

        self.assertGreater(len(analysis.strengths), 0)
        self.assertGreater(len(analysis.weaknesses), 0)

        ats = analysis.ats_analysis
        self.assertLessEqual(len(ats.missing_keywords), 5)
        self.assertLessEqual(len(ats.format_issues), 3)
        self.assertEqual(ats.is_parseable, analysis.ats_compatibility_score > 60)
        if analysis.ats_compatibility_score > 75:
            self.assertEqual(ats.overall_compatibility, "high")
        elif analysis.ats_compatibility_score > 60:
            self.assertEqual(ats.overall_compatibility, "medium")
        else:
            self.assertEqual(ats.overall_compatibility, "low")

        industry = analysis.industry_analysis
        self.assertLessEqual(len(industry.relevant_skills), 5)
        self.assertLessEqual(len(industry.missing_skills), 5)
        self.assertLessEqual(len(industry.industry_trends), 3)
        for group in analysis.keyword_suggestions:
            self.assertLessEqual(len(group.missing), 5)
            self.assertLessEqual(len(group.overused), 3)
            self.assertEqual(len(group.missing), len(set(group.missing)))

        ids = [item.id for item in analysis.strengths + analysis.weaknesses + analysis.suggestions]
        self.assertEqual(len(ids), len(set(ids)))

    def test_identical_inputs_give_identical_output(self):
        for text in (STRONG_RESUME_TEXT, KEYWORD_FREE_TEXT, ""):
            first = analyze_resume(text, "finance")
            second = analyze_resume(text, "finance")
            self.assertEqual(first, second)
            self.assertEqual(first.model_dump_json(by_alias=True), second.model_dump_json(by_alias=True))

    def test_non_string_input_is_rejected(self):
        with self.assertRaises(TypeError):
            analyze_resume(None)  # type: ignore[arg-type]

    def test_output_uses_camel_case_aliases(self):
        payload = analyze_resume(STRONG_RESUME_TEXT).model_dump(by_alias=True)
        self.assertIn("overallScore", payload)
        self.assertIn("atsCompatibilityScore", payload)
        self.assertIn("isParseable", payload["atsAnalysis"])
        self.assertIn("relevantSkills", payload["industryAnalysis"])

    def test_result_is_immutable(self):
        analysis = analyze_resume(STRONG_RESUME_TEXT)
        with self.assertRaises(Exception):
            analysis.overall_score = 1  # type: ignore[misc]

    def test_result_collections_cannot_be_mutated_in_place(self):
        analysis = analyze_resume("x", "technology")
        self.assertIsInstance(analysis.strengths, tuple)
        with self.assertRaises(AttributeError):
            analysis.strengths.append(analysis.strengths[0])  # type: ignore[attr-defined]
        self.assertEqual(len(analysis.strengths), 1)

        for values in (
            analysis.weaknesses,
            analysis.suggestions,
            analysis.keyword_suggestions,
            analysis.ats_analysis.missing_keywords,
            analysis.ats_analysis.format_issues,
            analysis.industry_analysis.relevant_skills,
            analysis.industry_analysis.industry_trends,
        ):
            self.assertIsInstance(values, tuple)
        for suggestion in analysis.suggestions:
            self.assertIsInstance(suggestion.examples, tuple)
        for group in analysis.keyword_suggestions:
            self.assertIsInstance(group.missing, tuple)
            self.assertIsInstance(group.overused, tuple)

    def test_result_still_serializes_lists(self):
        payload = analyze_resume("x").model_dump(by_alias=True, mode="json")
        self.assertIsInstance(payload["strengths"], list)
        self.assertIsInstance(payload["atsAnalysis"]["formatIssues"], list)


class AsyncAnalysisTests(unittest.TestCase):
    def test_async_wrapper_matches_sync_result(self):
        expected = analyze_resume(STRONG_RESUME_TEXT, "technology")
        result = asyncio.run(analyze_resume_async(STRONG_RESUME_TEXT, "technology", delay_seconds=0.01))
        self.assertEqual(result, expected)

    def test_async_without_delay(self):
        result = asyncio.run(analyze_resume_async("", delay_seconds=0))
        self.assertGreater(len(result.strengths), 0)


if __name__ == "__main__":
    unittest.main()
