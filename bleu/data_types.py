from typing import Sequence, Tuple


# A sentence is an ordered series of tokens; the library never splits or joins text itself.
Sentence = Sequence[str]

# N-grams are identified by their exact token tuple and used directly as Counter keys.
NGram = Tuple[str, ...]
