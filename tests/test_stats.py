import unittest

from selfquiz.quiz.question import Question
from selfquiz.results.schema import Attempt
from selfquiz.stats.stats import format_answers, format_history, format_question, format_summary


Q1 = Question(id=1, prompt="What is the supreme law of the land?", accepted_answers=("the Constitution",))
Q2 = Question(id=None, prompt="Name two national U.S. holidays.", accepted_answers=("Labor Day", "Thanksgiving"))


class FormatTests(unittest.TestCase):
    def test_question_header(self) -> None:
        self.assertEqual(format_question(Q1, 0, 3), "Question 1 of 3:\nWhat is the supreme law of the land?")

    def test_answers_numbered_and_bulleted(self) -> None:
        self.assertIn("  2. Thanksgiving", format_answers(Q2))
        self.assertIn("  - Labor Day", format_answers(Q2, numbered=False))

    def test_summary_all_correct(self) -> None:
        text = format_summary(Attempt(total_questions=2, correct_count=2, question_count=2))
        self.assertIn("You scored 2 out of 2.", text)
        self.assertIn("All correct!", text)
        self.assertNotIn("Ended early", text)

    def test_summary_lists_missed_and_early_end(self) -> None:
        text = format_summary(Attempt(total_questions=1, correct_count=0, missed_questions=(Q2,), question_count=4))
        self.assertIn("- Name two national U.S. holidays.", text)
        self.assertIn("Ended early: 1 of 4 questions graded.", text)

    def test_history_lines(self) -> None:
        attempts = [
            Attempt(total_questions=4, correct_count=3, question_count=4),
            Attempt(total_questions=0, correct_count=0, question_count=0),
        ]
        text = format_history(attempts)
        self.assertIn("Attempt 1: 3 / 4 correct (75%)", text)
        self.assertIn("Attempt 2: 0 / 0 correct (0%)", text)

    def test_empty_history(self) -> None:
        self.assertIn("(none yet)", format_history([]))


class AttemptTests(unittest.TestCase):
    def test_derived_fields(self) -> None:
        a = Attempt(total_questions=3, correct_count=1, missed_questions=(Q1, Q2), question_count=5)
        self.assertEqual(a.wrong_count, 2)
        self.assertTrue(a.ended_early)
        self.assertEqual(a.percent, 33)
        self.assertEqual(a.to_json()["missed_questions"][1]["id"], None)


if __name__ == "__main__":
    unittest.main()
