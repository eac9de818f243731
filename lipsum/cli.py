"""
Command line interface for lipsum.

Examples:
    lipsum -n 20
    lipsum -n 50 --seed 7
    lipsum -n 30 --corpus speeches.txt comments.csv --start "It" "was"
"""

import argparse
import random

from lipsum.corpora import read_corpus
from lipsum.models.default_chain import build_default_chain
from lipsum.models.markov_chain import MarkovChain
from lipsum.utils.config_loader import load_config
from lipsum.utils.loggers.json_logger import get_logger, log_json


def _non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def build_parser():
    """Creates the argument parser for the `lipsum` command."""
    parser = argparse.ArgumentParser(
        prog="lipsum",
        description="Generate lorem ipsum placeholder text with a Markov chain")
    parser.add_argument("-n", "--words", type=_non_negative_int, default=25,
                        help="Number of words to generate (default: 25)")
    parser.add_argument("--start", nargs=2, metavar=("WORD1", "WORD2"),
                        help="Bigram to start generating from")
    parser.add_argument("--corpus", nargs="+", metavar="PATH",
                        help="Text or CSV files to learn instead of the bundled corpora")
    parser.add_argument("--seed", type=int,
                        help="Seed for reproducible output")
    parser.add_argument("--env", default=None,
                        help="Configuration environment (default: LIPSUM_ENV or development)")
    parser.add_argument("--log-file", default=None,
                        help="Write JSON logs to this file")
    return parser


def main(argv=None):
    """
    Runs the command line interface.

    Args:
        argv (list, optional): Arguments, defaults to sys.argv[1:]

    Returns:
        int: Exit status
    """
    args = build_parser().parse_args(argv)
    config = load_config(environment=args.env)

    log_config = config["logging"]
    logger = get_logger(
        "lipsum",
        log_file=args.log_file or log_config.get("log_file"),
        console_json=log_config.get("console_json", False),
        level=log_config.get("level", "INFO")
    )

    seed = args.seed if args.seed is not None else config.get("seed")

    if args.corpus:
        chain = MarkovChain(rng=random.Random(seed), logger=logger)
        for path in args.corpus:
            try:
                chain.learn(read_corpus(path))
            except (OSError, ValueError) as e:
                logger.error(f"Failed to read corpus {path}: {e}")
                return 1
        start = tuple(args.start) if args.start else None
    else:
        # Corpora, seed and start bigram come from the selected environment
        try:
            chain = build_default_chain(rng=random.Random(seed), config=config)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load configured corpora {config['corpora']}: {e}")
            return 1
        start = tuple(args.start) if args.start else tuple(config["default_start"])

    log_json(logger, "Chain trained", {
        "state_count": chain.size(),
        "seed": seed,
        "environment": args.env
    })

    if start is not None:
        print(chain.generate_from(args.words, start))
    else:
        print(chain.generate(args.words))
    return 0
