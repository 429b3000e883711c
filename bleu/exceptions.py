class InvalidInput(ValueError):
    """
    Raised for inputs no BLEU score can be defined for, e.g. an empty reference collection or an empty weight vector.
    Subclasses ValueError so existing 'except ValueError' handlers keep working.
    """
