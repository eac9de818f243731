"""
Default lorem ipsum chain.

Every thread lazily builds its own `MarkovChain` trained on the bundled corpora
and keeps it for the rest of its life, so `generate_default` can be called from
several threads without sharing a random source or a model under construction.
"""

import logging
import random
import threading

from lipsum.corpora import load_corpus
from lipsum.models.markov_chain import MarkovChain
from lipsum.utils.config_loader import load_config

logger = logging.getLogger(__name__)

_local = threading.local()


def build_default_chain(rng=None, config=None):
    """
    Builds a new chain trained on the configured corpora.

    The corpora are learned in the configured order. Learning cost grows with
    the size of the chain, so the smallest text comes first.

    Args:
        rng (optional): Random source for the chain. When omitted a
                        ``random.Random`` seeded from the config is used.
        config (dict, optional): Configuration, loaded with `load_config` if omitted

    Returns:
        MarkovChain: The trained chain
    """
    config = config if config is not None else load_config()
    if rng is None:
        rng = random.Random(config.get("seed"))

    chain = MarkovChain(rng=rng)
    for name in config["corpora"]:
        chain.learn(load_corpus(name))

    logger.info("Default chain built", extra={
        "metrics": {
            "corpora": list(config["corpora"]),
            "state_count": chain.size(),
            "thread": threading.current_thread().name
        }
    })
    return chain


def get_default_chain():
    """Returns the calling thread's default chain, building it on first use."""
    if getattr(_local, "chain", None) is None:
        config = load_config()
        _local.chain = build_default_chain(config=config)
        _local.start = tuple(config["default_start"])
    return _local.chain


def reset_default_chain():
    """Forgets the calling thread's default chain."""
    _local.chain = None
    _local.start = None


def generate_default(n):
    """
    Generate `n` words of lorem ipsum text.

    The output starts with "Lorem ipsum" and follows the traditional lorem
    ipsum text; longer outputs drift into random text.

    Args:
        n (int): Number of words to generate

    Returns:
        str: The generated text

    Example:
        >>> generate_default(7)
        'Lorem ipsum dolor sit amet, consectetur adipiscing'
    """
    chain = get_default_chain()
    return chain.generate_from(n, _local.start)
