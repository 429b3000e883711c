from collections import Counter
from typing import List, Sequence

from bleu.data_types import Sentence, NGram


def lowercase_sentence(sentence: Sentence) -> List[str]:
    # Returns a new list, the caller's sequence is left untouched.
    return [token.lower() for token in sentence]


def lowercase_references(references: Sequence[Sentence]) -> List[List[str]]:
    return [lowercase_sentence(reference) for reference in references]


def get_ngrams(sentence: Sentence, n: int) -> List[NGram]:
    assert n >= 1, f"N-gram order must be positive, got {n}."
    return [tuple(sentence[index:index + n]) for index in range(len(sentence) - n + 1)]


def count_ngrams(sentence: Sentence, n: int) -> Counter:
    return Counter(get_ngrams(sentence, n))
