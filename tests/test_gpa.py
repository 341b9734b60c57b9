import unittest

from gpacalc.domain.logic.gpa import aggregate, is_valid_credit_hours, validate_entries
from gpacalc.domain.models.entities import EntryIssue, InvalidEntries, NoEntries, SubjectEntry, Success


class GPATests(unittest.TestCase):
    def test_no_entries(self):
        self.assertEqual(aggregate([]), NoEntries())

    def test_single_top_subject(self):
        outcome = aggregate([SubjectEntry(95, 3)])
        self.assertIsInstance(outcome, Success)
        self.assertEqual(outcome.overall_gpa, 4.0)
        self.assertEqual(outcome.total_credit_hours, 3.0)

    def test_weighted_average(self):
        outcome = aggregate([SubjectEntry(85, 3), SubjectEntry(65, 2)])
        self.assertIsInstance(outcome, Success)
        self.assertEqual(outcome.overall_gpa, 3.35)
        self.assertEqual([g.grade_point for g in outcome.grades], [3.75, 2.75])
        self.assertEqual([g.letter_grade for g in outcome.grades], ["A", "C"])

    def test_marks_out_of_range(self):
        outcome = aggregate([SubjectEntry(150, 3)])
        self.assertEqual(outcome, InvalidEntries((EntryIssue(0, "marks"),)))

    def test_non_positive_credit_hours(self):
        self.assertIsInstance(aggregate([SubjectEntry(70, 0)]), InvalidEntries)
        self.assertIsInstance(aggregate([SubjectEntry(70, -1)]), InvalidEntries)

    def test_one_bad_entry_invalidates_batch(self):
        outcome = aggregate([SubjectEntry(70, 3), SubjectEntry(-5, 2)])
        self.assertIsInstance(outcome, InvalidEntries)
        self.assertEqual(outcome.invalid_indexes, [1])

    def test_every_invalid_field_reported(self):
        entries = [
            SubjectEntry(float("nan"), 3),
            SubjectEntry(80, 4),
            SubjectEntry(101, 0),
        ]
        self.assertEqual(
            validate_entries(entries),
            [EntryIssue(0, "marks"), EntryIssue(2, "marks"), EntryIssue(2, "credit_hours")],
        )
        self.assertEqual(aggregate(entries).invalid_indexes, [0, 2])

    def test_order_independent(self):
        entries = [SubjectEntry(85, 3), SubjectEntry(65, 2), SubjectEntry(72.5, 4), SubjectEntry(40, 1)]
        forward = aggregate(entries)
        backward = aggregate(list(reversed(entries)))
        self.assertEqual(forward.overall_gpa, backward.overall_gpa)

    def test_deterministic(self):
        entries = [SubjectEntry(77, 2), SubjectEntry(91, 3)]
        self.assertEqual(aggregate(entries), aggregate(entries))

    def test_accepts_generator(self):
        outcome = aggregate(SubjectEntry(m, 1) for m in (50, 60))
        self.assertEqual(outcome.overall_gpa, 2.25)

    def test_oversized_int_values_are_invalid(self):
        self.assertEqual(aggregate([SubjectEntry(10**400, 3)]), InvalidEntries((EntryIssue(0, "marks"),)))
        self.assertEqual(aggregate([SubjectEntry(70, 10**400)]), InvalidEntries((EntryIssue(0, "credit_hours"),)))

    def test_is_valid_credit_hours(self):
        self.assertTrue(is_valid_credit_hours(0.5))
        self.assertFalse(is_valid_credit_hours(0))
        self.assertFalse(is_valid_credit_hours(float("inf")))
        self.assertFalse(is_valid_credit_hours(None))


if __name__ == "__main__":
    unittest.main()
