"""
Word Stream

A never-ending iterator that walks an order-2 Markov chain one word at a time,
plus the helper that turns a finite prefix of such a stream into text.

Classes:
    - WordStream: Stateful iterator over the words of a Markov chain.

Functions:
    - join_words: Joins words with single spaces.

Notes:
    - A stream keeps references to the transition table and the known-states
      list of the chain that created it. Calling ``learn`` on that chain while
      the stream is in use is not supported.
    - When the current state is not in the table the stream jumps to a random
      known state before picking the next word. The word being emitted is still
      the first word of the old state, so an unknown starting bigram yields its
      first word followed by text from an unrelated part of the chain.
"""

import logging

from lipsum.models.sampler import choose


class WordStream:
    """
    Iterator producing words from a Markov chain, starting at a given bigram.

    Attributes:
        state (tuple): The current bigram. Its first word is the next word
                       returned by ``next()``.
    """

    def __init__(self, transitions, states, rng, start, logger=None):
        """
        Initializes the stream.

        Args:
            transitions (dict): Bigram -> list of successor words (read only)
            states (Sequence): Sorted list of known bigrams (read only)
            rng: Random source with a ``random()`` method, owned by this stream
                 for the duration of the walk
            start (tuple): The bigram to start from; it need not be known
            logger (Logger, optional): Logger for recovery events
        """
        self._transitions = transitions
        self._states = states
        self._rng = rng
        self.state = tuple(start)
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def __iter__(self):
        return self

    def __next__(self):
        # Nothing to produce, ever, without states to walk or jump to
        if not self._transitions or not self._states:
            raise StopIteration

        word = self.state[0]

        # Recover from unknown states by jumping to a random known one
        while self.state not in self._transitions:
            unknown = self.state
            self.state = choose(self._rng, self._states)
            self.logger.debug("Word stream left the chain, restarting at a random state", extra={
                "metrics": {
                    "unknown_state": list(unknown),
                    "new_state": list(self.state)
                }
            })

        successor = choose(self._rng, self._transitions[self.state])
        self.state = (self.state[1], successor)
        return word


def join_words(words):
    """
    Join words into a sentence separated by single spaces.

    Args:
        words (Iterable[str]): Finite iterable of words

    Returns:
        str: The joined text, or an empty string when there are no words

    Example:
        >>> join_words(["Lorem", "ipsum", "dolor"])
        'Lorem ipsum dolor'
        >>> join_words([])
        ''
    """
    return " ".join(words)
