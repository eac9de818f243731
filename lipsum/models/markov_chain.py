"""
Order-2 Markov Chain

A Markov chain of order two learns which word follows each pair of consecutive
words (a bigram) in the input texts and generates new text by repeatedly
sampling a successor for the last two words produced.

Classes:
    - MarkovChain: Learns word transitions and generates text from them.

Usage:
    1. Create an instance of `MarkovChain`, optionally with a seeded random source.
    2. Call `learn` with one or more texts.
    3. Generate text with `generate` (random start) or `generate_from` (given start).

Example:
    >>> chain = MarkovChain()
    >>> chain.learn("red green blue")
    >>> chain.lookup(("red", "green"))
    ['blue']
    >>> chain.learn("red green yellow")
    >>> chain.lookup(("red", "green"))
    ['blue', 'yellow']
"""

import logging
import random
from itertools import islice

from lipsum.models.sampler import choose
from lipsum.models.word_stream import WordStream, join_words

# Starting state used when the chain has no states to choose from
EMPTY_STATE = ("", "")


class MarkovChain:
    """
    Simple order-2 Markov chain for generating placeholder text.

    Successor lists keep every observed word, including repeats, so a word seen
    twice after a bigram is twice as likely to be picked.

    Attributes:
        transitions (dict): Bigram -> list of successor words, in the order seen
        rng: Random source used for sampling
        logger (Logger): Logger for training and generation events
    """

    def __init__(self, rng=None, logger=None):
        """
        Initializes an empty Markov chain.

        Args:
            rng (optional): Random source with a ``random()`` method returning
                            floats in [0, 1). A fresh ``random.Random()`` is
                            used when omitted; pass ``random.Random(seed)`` for
                            reproducible output.
            logger (Logger, optional): Logger instance, defaults to the module logger
        """
        self.transitions = {}
        self._states = []
        self.rng = rng if rng is not None else random.Random()
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def learn(self, text):
        """
        Adds the word transitions of a text to the chain.

        Can be called several times to build up the chain. Texts with fewer
        than three words contribute nothing.

        Args:
            text (str): The input text. Words are separated by runs of whitespace.

        Example:
            Input: "foo bar baz quuz"
            Updates:
                - transitions[("foo", "bar")] gets "baz"
                - transitions[("bar", "baz")] gets "quuz"
        """
        words = text.split()
        for a, b, c in zip(words, words[1:], words[2:]):
            self.transitions.setdefault((a, b), []).append(c)

        # Keep the known states in sync with the table
        self._states = sorted(self.transitions)

        self.logger.debug("Learned text", extra={
            "metrics": {
                "word_count": len(words),
                "transition_count": max(len(words) - 2, 0),
                "state_count": len(self._states)
            }
        })

    def lookup(self, state):
        """
        Returns the words that can follow the given bigram.

        Args:
            state (tuple): A pair of consecutive words

        Returns:
            list or None: Successor words, or None if the bigram is unknown
        """
        return self.transitions.get(tuple(state))

    @property
    def states(self):
        """Sorted tuple of all known bigrams."""
        return tuple(self._states)

    def size(self):
        """Returns the number of states in the chain."""
        return len(self.transitions)

    def __len__(self):
        return self.size()

    def is_empty(self):
        """Returns True if the chain has no states."""
        return self.size() == 0

    def stream(self, rng=None):
        """
        Makes a never-ending word iterator starting at a random known state.

        Args:
            rng (optional): Random source for this stream. Defaults to the
                            chain's own source.

        Returns:
            WordStream: Iterator over generated words
        """
        rng = rng if rng is not None else self.rng
        if self.is_empty():
            start = EMPTY_STATE
        else:
            start = choose(rng, self._states)
        return self.stream_from(start, rng=rng)

    def stream_from(self, start, rng=None):
        """
        Makes a never-ending word iterator starting at the given bigram.

        The bigram does not have to be a known state. Its first word is always
        produced first; after that an unknown state makes the stream continue
        from a random known state.

        Args:
            start (tuple): The starting pair of words
            rng (optional): Random source for this stream. Threads sharing a
                            trained chain should each pass their own.

        Returns:
            WordStream: Iterator over generated words
        """
        return WordStream(
            self.transitions,
            self._states,
            rng if rng is not None else self.rng,
            start,
            logger=self.logger
        )

    def generate(self, n):
        """
        Generates `n` words of text starting from a random point in the chain.

        Args:
            n (int): Number of words to generate

        Returns:
            str: The generated words separated by single spaces. Empty if the
                 chain has not learned anything.

        Raises:
            ValueError: If `n` is negative
        """
        self._check_word_count(n)
        return join_words(islice(self.stream(), n))

    def generate_from(self, n, start):
        """
        Generates `n` words of text starting from the given bigram.

        Args:
            n (int): Number of words to generate
            start (tuple): The starting pair of words, known or not

        Returns:
            str: The generated words separated by single spaces

        Raises:
            ValueError: If `n` is negative
        """
        self._check_word_count(n)
        return join_words(islice(self.stream_from(start), n))

    def _check_word_count(self, n):
        if n < 0:
            error_msg = f"Number of words must be non-negative, got {n}"
            self.logger.error(error_msg)
            raise ValueError(error_msg)
