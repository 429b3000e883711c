"""
Sentence level BLEU, Papineni et al. 2002 (https://aclanthology.org/P02-1040.pdf), following the formulation of the
NLTK implementation: orders without any overlap are left out of the weighted geometric mean instead of zeroing the
score, unless no order has overlap at all.
"""
import math
import logging
from typing import Sequence

from pydantic import ValidationError

from bleu.config import BleuConfig
from bleu.data_types import Sentence
from bleu.exceptions import InvalidInput
from bleu.utilities import lowercase_sentence, lowercase_references
from bleu.metrics.bleu_statistics import BleuStatisticsCollector
from bleu.metrics.brevity_penalty import brevity_penalty, closest_reference_length
from bleu.metrics.modified_precision import count_clipped_matches, precision_from_counts

logger = logging.getLogger(__name__)


def compute(candidate: Sentence, references: Sequence[Sentence], weights: Sequence[float],
            statistics_collector: BleuStatisticsCollector = None) -> float:
    """
    BLEU score of 'candidate' against 'references'. The length of 'weights' selects the n-gram orders 1..N, the
    values are the coefficients of the weighted geometric mean of the order precisions. They are not normalized.
    """
    config = _make_config(weights, smoothing=False)
    return calculate_bleu(candidate, references, config=config, statistics_collector=statistics_collector)


def smooth(candidate: Sentence, references: Sequence[Sentence], weights: Sequence[float],
           statistics_collector: BleuStatisticsCollector = None) -> float:
    """
    Same as compute(), but adds one to numerator and denominator of every order's precision so that a single order
    without matches does not drag the score to zero. Meant for scoring individual sentences, see section 4 of
    Lin and Och 2004 (https://aclanthology.org/C04-1072.pdf).
    """
    config = _make_config(weights, smoothing=True)
    return calculate_bleu(candidate, references, config=config, statistics_collector=statistics_collector)


def calculate_bleu(candidate: Sentence, references: Sequence[Sentence], config: BleuConfig = None,
                   statistics_collector: BleuStatisticsCollector = None) -> float:
    """
    Main function to calculate the BLEU score, compute() and smooth() build a config and call it. 'config.weights'
    selects the n-gram orders 1..N and their coefficients, 'config.smoothing' adds one to numerator and denominator of
    every order's precision; without a config four uniform weights of 0.25 and no smoothing are used. Tokens are
    lower-cased on copies, the caller's sequences are not modified.
    An empty candidate scores 0.0 right away, the brevity penalty would be undefined for it. Orders without any clipped
    match are left out of the weighted geometric mean, and if no order has a match at all the score is 0.0 regardless
    of brevity penalty and smoothing. If given, 'statistics_collector' receives the counts and precision of each order
    for a non-empty candidate, and the lengths and brevity penalty only if the score is not decided before them.
    Raises InvalidInput if 'references' is empty.
    """
    if config is None:
        config = BleuConfig()

    if not references:
        raise InvalidInput("At least one reference is required to calculate BLEU.")

    candidate = lowercase_sentence(candidate)
    references = lowercase_references(references)

    if not candidate:
        logger.debug("Empty candidate, BLEU is 0.")
        return 0.0

    weighted_log_sum = 0.0
    num_orders_with_overlap = 0

    for n, weight in enumerate(config.weights, start=1):
        num_clipped_matches, num_candidate_ngrams = count_clipped_matches(candidate, references, n)
        precision = precision_from_counts(num_clipped_matches, num_candidate_ngrams, smoothing=config.smoothing)

        logger.debug("Order %s: %s/%s clipped matches, precision %s",
                     n, num_clipped_matches, num_candidate_ngrams, precision)

        if statistics_collector:
            statistics_collector.add_order(num_clipped_matches, num_candidate_ngrams, precision)

        if precision > 0:
            num_orders_with_overlap += 1
            weighted_log_sum += weight * math.log(precision)

    # No overlap in any order, log(0) would be undefined. See https://github.com/nltk/nltk/issues/1268
    if not num_orders_with_overlap:
        logger.debug("No n-gram overlap with any reference, BLEU is 0.")
        return 0.0

    penalty = brevity_penalty(candidate, references)

    if statistics_collector:
        reference_length = closest_reference_length(len(candidate), [len(reference) for reference in references])
        statistics_collector.add_lengths(len(candidate), reference_length, penalty)

    return penalty * math.exp(weighted_log_sum)


def _make_config(weights: Sequence[float], smoothing: bool) -> BleuConfig:
    if weights is None:
        raise InvalidInput("Weights are required, one per n-gram order.")

    try:
        return BleuConfig(weights=list(weights), smoothing=smoothing)
    except ValidationError as error:
        raise InvalidInput(f"Invalid weights {list(weights)}: {error}") from error
