"""
lipsum - lorem ipsum placeholder text from an order-2 Markov chain.

    >>> from lipsum import generate_default
    >>> generate_default(5)
    'Lorem ipsum dolor sit amet,'
"""

from lipsum.corpora import LIBER_PRIMUS, LOREM_IPSUM
from lipsum.models.default_chain import generate_default
from lipsum.models.markov_chain import MarkovChain
from lipsum.models.word_stream import WordStream

__version__ = "0.6.0"

__all__ = [
    "LIBER_PRIMUS",
    "LOREM_IPSUM",
    "MarkovChain",
    "WordStream",
    "generate_default",
]
