import math
import logging
from typing import Sequence

from bleu.data_types import Sentence
from bleu.exceptions import InvalidInput

logger = logging.getLogger(__name__)


def closest_reference_length(candidate_length: int, reference_lengths: Sequence[int]) -> int:
    """
    Returns the reference length closest to the candidate length. On ties the reference that comes first wins, so
    the result only depends on the input order.
    """
    assert reference_lengths, "At least one reference length is required."

    closest_length = reference_lengths[0]
    for reference_length in reference_lengths[1:]:
        if abs(reference_length - candidate_length) < abs(closest_length - candidate_length):
            closest_length = reference_length

    return closest_length


def brevity_penalty(candidate: Sentence, references: Sequence[Sentence]) -> float:
    """
    Modified precision alone favours short candidates, which can reach a high precision by only containing a few
    safe words. The brevity penalty counters this by scaling the score down exponentially when the candidate is
    shorter than the reference closest to it in length. Candidates longer than that reference are not penalized,
    precision already punishes them.
    """
    if not references:
        raise InvalidInput("Brevity penalty needs at least one reference.")

    candidate_length = len(candidate)
    if not candidate_length:
        raise InvalidInput("Brevity penalty is undefined for an empty candidate.")

    reference_length = closest_reference_length(candidate_length, [len(reference) for reference in references])

    if candidate_length > reference_length:
        penalty = 1.0
    else:
        penalty = math.exp(1 - reference_length / candidate_length)

    logger.debug("Candidate length %s, closest reference length %s, brevity penalty %s",
                 candidate_length, reference_length, penalty)

    return penalty
