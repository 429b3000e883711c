import unittest

from bleu.metrics.modified_precision import count_clipped_matches, modified_precision, precision_from_counts
from .utilities import split, REFERENCES_CAT, REFERENCES_PARTY


class ModifiedPrecisionTest(unittest.TestCase):

    def test_modified_precision(self):
        cases = [
            # (candidate, references, n, expected precision)
            (split("cat mat"), [split("cat on the mat")], 1, 1.0),
            (split("cat mat"), [split("cat on the mat")], 2, 0.0),
            (split("the the the the the the the"), REFERENCES_CAT, 1, 2 / 7),
            (split("the the the the the the the"), REFERENCES_CAT, 2, 0.0),
            (split("of the"), REFERENCES_PARTY, 1, 1.0),
            (split("of the"), REFERENCES_PARTY, 2, 1.0),
        ]

        for candidate, references, n, expected_precision in cases:
            with self.subTest(candidate=candidate, n=n):
                self.assertAlmostEqual(modified_precision(candidate, references, n), expected_precision, places=4)

    def test_clipping_uses_maximum_of_single_reference(self):
        # "the" occurs twice in the first and once in the second reference. Summing over references would allow 3.
        num_clipped_matches, num_candidate_ngrams = count_clipped_matches(
            split("the the the the the the the"), REFERENCES_CAT, 1)

        self.assertEqual(num_clipped_matches, 2)
        self.assertEqual(num_candidate_ngrams, 7)

    def test_order_longer_than_candidate(self):
        self.assertEqual(count_clipped_matches(split("cat mat"), [split("cat mat")], 3), (0, 0))
        self.assertEqual(modified_precision(split("cat mat"), [split("cat mat")], 3), 0.0)
        # Smoothing does not turn a missing order into a non-zero precision.
        self.assertEqual(modified_precision(split("cat mat"), [split("cat mat")], 3, smoothing=True), 0.0)

    def test_empty_reference(self):
        self.assertEqual(modified_precision(split("cat mat"), [[]], 1), 0.0)
        self.assertEqual(modified_precision(split("cat mat"), [[], split("cat")], 1), 0.5)

    def test_case_sensitive_without_scorer(self):
        # Case folding is done by the scorer, the precision itself compares tokens as given.
        self.assertEqual(modified_precision(split("Cat"), [split("cat")], 1), 0.0)

    def test_smoothing(self):
        candidate = split("artichokes with the butter")
        references = [split("hearts of artichoke in butter sauce")]

        self.assertAlmostEqual(modified_precision(candidate, references, 1, smoothing=True), 2 / 5)
        self.assertAlmostEqual(modified_precision(candidate, references, 2, smoothing=True), 1 / 4)

    def test_precision_from_counts(self):
        self.assertEqual(precision_from_counts(1, 4), 0.25)
        self.assertEqual(precision_from_counts(0, 3), 0.0)
        self.assertEqual(precision_from_counts(0, 3, smoothing=True), 0.25)
        self.assertEqual(precision_from_counts(0, 0, smoothing=True), 0.0)


if __name__ == '__main__':
    unittest.main()
