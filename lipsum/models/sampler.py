"""
Uniform sampling helper shared by the Markov chain and its word streams.
"""


def choose(rng, values):
    """
    Choose a random element from a sequence.

    Only the ``random()`` method of ``rng`` is used, so any object that
    returns floats in [0, 1) works (``random.Random``, ``random.SystemRandom``
    or a test double).

    Args:
        rng: Random source with a ``random()`` method
        values (Sequence): The items to choose from

    Returns:
        The chosen element, or None if ``values`` is empty

    Example:
        >>> import random
        >>> choose(random.Random(1), ["a", "b", "c"]) in {"a", "b", "c"}
        True
        >>> choose(random.Random(1), []) is None
        True
    """
    if not values:
        return None

    # Scale the draw into an index; min() guards float rounding at the top end
    index = min(int(len(values) * rng.random()), len(values) - 1)
    return values[index]
