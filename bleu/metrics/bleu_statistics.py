from typing import Any, Dict, List, Optional
from collections import OrderedDict


class BleuStatisticsCollector:
    """
    Collects the intermediate values the BLEU score is combined from: clipped matches, candidate n-gram counts and
    precision per n-gram order, plus lengths and brevity penalty. Lengths and brevity penalty stay None if the score
    was decided before the brevity penalty was needed (no overlap at all, or an empty candidate).
    """

    def __init__(self):
        self._num_clipped_matches: List[int] = []
        self._num_candidate_ngrams: List[int] = []
        self._precisions: List[float] = []
        self._num_orders_with_overlap = 0
        self._candidate_length: Optional[int] = None
        self._reference_length: Optional[int] = None
        self._brevity_penalty: Optional[float] = None

    def add_order(self, num_clipped_matches: int, num_candidate_ngrams: int, precision: float):
        """
        Called once per n-gram order, in ascending order.
        """
        self._num_clipped_matches.append(num_clipped_matches)
        self._num_candidate_ngrams.append(num_candidate_ngrams)
        self._precisions.append(precision)

        if precision > 0:
            self._num_orders_with_overlap += 1

    def add_lengths(self, candidate_length: int, reference_length: int, brevity_penalty: float):
        self._candidate_length = candidate_length
        self._reference_length = reference_length
        self._brevity_penalty = brevity_penalty

    def get_statistics(self) -> Dict[str, Any]:
        return OrderedDict(
            num_clipped_matches=list(self._num_clipped_matches),
            num_candidate_ngrams=list(self._num_candidate_ngrams),
            precisions=list(self._precisions),
            num_orders_with_overlap=self._num_orders_with_overlap,
            candidate_length=self._candidate_length,
            reference_length=self._reference_length,
            brevity_penalty=self._brevity_penalty,
        )
