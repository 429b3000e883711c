from typing import List


def split(sentence: str) -> List[str]:
    return sentence.split(" ")


REFERENCES_CAT = [
    split("the cat is on the mat"),
    split("there is a cat on the mat"),
]

REFERENCES_PARTY = [
    split("It is a guide to action that ensures that the military will forever heed Party commands."),
    split("It is the guiding principle which guarantees the military forces always being under the command of the "
          "Party."),
    split("It is the practical guide for the army always to heed the directions of the party"),
]
