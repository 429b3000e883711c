DEFAULT_WEIGHTS = (0.25, 0.25, 0.25, 0.25)

# Added to both numerator and denominator of every order's precision when smoothing is requested.
# See section 4 of Lin and Och 2004, https://aclanthology.org/C04-1072.pdf
SMOOTHING_FACTOR = 1.0
