import logging
from typing import Sequence, Tuple

from bleu.data_types import Sentence
from bleu.constants import SMOOTHING_FACTOR
from bleu.utilities import count_ngrams

logger = logging.getLogger(__name__)


def count_clipped_matches(candidate: Sentence, references: Sequence[Sentence], n: int) -> Tuple[int, int]:
    """
    Returns the number of candidate n-grams matched in the references, with each n-gram's count clipped to its
    maximum count in any single reference, and the total number of candidate n-grams.
    """
    candidate_counts = count_ngrams(candidate, n)
    if not candidate_counts:
        return 0, 0

    # Maximum over references, not the sum: a reference n-gram is exhausted once matched.
    max_reference_counts = dict.fromkeys(candidate_counts, 0)
    for reference in references:
        reference_counts = count_ngrams(reference, n)
        for ngram in candidate_counts:
            max_reference_counts[ngram] = max(max_reference_counts[ngram], reference_counts[ngram])

    num_clipped_matches = sum(
        min(count, max_reference_counts[ngram]) for ngram, count in candidate_counts.items())
    num_candidate_ngrams = sum(candidate_counts.values())

    assert num_clipped_matches <= num_candidate_ngrams
    return num_clipped_matches, num_candidate_ngrams


def precision_from_counts(num_clipped_matches: int, num_candidate_ngrams: int, smoothing=False) -> float:
    # A candidate shorter than the n-gram order has nothing to match, smoothing does not apply there.
    if not num_candidate_ngrams:
        return 0.0

    smoothing_factor = SMOOTHING_FACTOR if smoothing else 0.0
    return (num_clipped_matches + smoothing_factor) / (num_candidate_ngrams + smoothing_factor)


def modified_precision(candidate: Sentence, references: Sequence[Sentence], n: int, smoothing=False) -> float:
    """
    Modified n-gram precision as defined by Papineni et al. 2002 (https://aclanthology.org/P02-1040.pdf). Plain
    precision rewards candidates that repeat a reference word many times, so here every candidate n-gram count is
    clipped to the maximum number of times it occurs in a single reference.
    Tokens are compared as given; the scorer lower-cases them beforehand.
    """
    num_clipped_matches, num_candidate_ngrams = count_clipped_matches(candidate, references, n)
    precision = precision_from_counts(num_clipped_matches, num_candidate_ngrams, smoothing=smoothing)

    logger.debug("Order %s: %s/%s clipped matches, precision %s (smoothing=%s)",
                 n, num_clipped_matches, num_candidate_ngrams, precision, smoothing)

    return precision
