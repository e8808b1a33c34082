import random
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_feedback import improve_sentence  # noqa: E402
from resume_feedback.services.sentence_improver import (  # noqa: E402
    FILLER_ACTION_VERBS,
    INVALID_SENTENCE_MESSAGE,
    QUANTIFIED_RESULTS,
)
from resume_feedback.taxonomy.industries import INDUSTRY_SENTENCE_TERMS  # noqa: E402


class SentenceImproverTests(unittest.TestCase):
    def test_blank_input_returns_message(self):
        for value in ("", "   ", "\n\t"):
            self.assertEqual(improve_sentence(value), INVALID_SENTENCE_MESSAGE)

    def test_passive_phrase_is_rewritten(self):
        improved = improve_sentence("was responsible for managing the team", rng=random.Random(1))
        self.assertNotIn("was responsible for", improved.lower())
        self.assertTrue(improved.startswith("managed managing the team"))

    def test_existing_action_verb_is_not_doubled(self):
        improved = improve_sentence("Led a team of engineers to deliver the project", rng=random.Random(2))
        self.assertTrue(improved.startswith("Led a team of engineers"))
        self.assertFalse(improved.lower().startswith("led led"))

    def test_verb_chosen_from_sentence_keywords(self):
        improved = improve_sentence("Built dashboards and created reports for sales", rng=random.Random(3))
        self.assertTrue(improved.startswith("Developed built dashboards"))

        improved = improve_sentence("Handled the enhancement backlog", rng=random.Random(3))
        self.assertTrue(improved.startswith("Improved handled"))

    def test_filler_verb_comes_from_catalog(self):
        improved = improve_sentence("Answered phone calls", rng=random.Random(4))
        self.assertIn(improved.split()[0], FILLER_ACTION_VERBS)

    def test_quantified_result_appended_only_when_missing(self):
        improved = improve_sentence("Led the weekly planning meeting for the whole department", rng=random.Random(5))
        self.assertTrue(any(improved.endswith(result) for result in QUANTIFIED_RESULTS))

        with_numbers = improve_sentence("Led the migration of 12 services to a new cluster", rng=random.Random(5))
        self.assertFalse(any(result in with_numbers for result in QUANTIFIED_RESULTS))

        short = improve_sentence("Led standups", rng=random.Random(5))
        self.assertEqual(short, "Led standups")

    def test_industry_term_appended(self):
        improved = improve_sentence("Led the release of 3 products", "technology", rng=random.Random(6))
        self.assertIn(" utilizing ", improved)
        self.assertTrue(any(term in improved for term in INDUSTRY_SENTENCE_TERMS["technology"]))

    def test_industry_term_not_repeated(self):
        sentence = "Led the move to cloud infrastructure for 4 teams"
        self.assertEqual(improve_sentence(sentence, "technology", rng=random.Random(7)), sentence)

    def test_unknown_industry_adds_nothing(self):
        sentence = "Led the move of 4 teams"
        self.assertEqual(improve_sentence(sentence, "agriculture", rng=random.Random(8)), sentence)

    def test_seeded_rng_is_repeatable(self):
        first = improve_sentence("Answered customer emails every morning before the shift", "marketing", rng=random.Random(9))
        second = improve_sentence("Answered customer emails every morning before the shift", "marketing", rng=random.Random(9))
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
