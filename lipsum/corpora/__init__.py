"""
Corpora

Seed texts for the Markov chain: the two bundled Latin texts and a reader for
user supplied corpus files.

Constants:
    - LOREM_IPSUM: The traditional lorem ipsum placeholder text.
    - LIBER_PRIMUS: Passages 1.1-3, 1.29-30 and 1.32-33 of the first book of
      Cicero's De finibus bonorum et malorum, the source lorem ipsum was
      scrambled from. Configure a file path under `corpora` to learn a
      complete edition instead.

Functions:
    - load_bundled: Returns a bundled corpus by name.
    - read_corpus: Reads a .txt or .csv corpus file into a single string.
    - load_corpus: Bundled corpus by name, otherwise a corpus file by path.

Notes:
    - LOREM_IPSUM alone makes a poor chain: every bigram has exactly one
      successor, so generation just replays the text. Learning LIBER_PRIMUS as
      well gives the chain real choices.
"""

import os

import pandas as pd

CORPORA_DIR = os.path.dirname(os.path.abspath(__file__))

BUNDLED_CORPORA = {
    "lorem_ipsum": os.path.join(CORPORA_DIR, "lorem_ipsum.txt"),
    "liber_primus": os.path.join(CORPORA_DIR, "liber_primus.txt"),
}


def _read_text(path):
    with open(path, "r", encoding="UTF-8") as f:
        return f.read()


def load_bundled(name):
    """
    Returns the text of a bundled corpus.

    Args:
        name (str): One of the keys of `BUNDLED_CORPORA`

    Returns:
        str: The corpus text

    Raises:
        ValueError: If no corpus with that name is bundled
    """
    if name not in BUNDLED_CORPORA:
        raise ValueError(
            f"Unknown bundled corpus '{name}', expected one of {sorted(BUNDLED_CORPORA)}")
    return _read_text(BUNDLED_CORPORA[name])


def _read_pd_csv(csv_file_path, header=None):
    """
    Reads a CSV file and joins the rows of its first column with newlines.

    Args:
        csv_file_path (str): The path to the CSV file.
        header (int or None): Row number to use as the column names, or None if
                              the file has no header row.

    Returns:
        str: The first column as a single string. Blank cells are skipped and
             an empty file gives an empty string.
    """
    try:
        df = pd.read_csv(csv_file_path, encoding="UTF-8", header=header)
    except pd.errors.EmptyDataError:
        return ""
    return "\n".join(df.iloc[:, 0].dropna().astype(str))


def read_corpus(path, header=None):
    """
    Reads a corpus file to learn from.

    Plain text files are read as UTF-8. For CSV files only the first column is
    used, one row per line.

    Args:
        path (str): Path to a .txt or .csv file
        header (int or None): Header row for CSV files (ignored for text files)

    Returns:
        str: The corpus text

    Raises:
        ValueError: If the file type is not supported
        FileNotFoundError: If the file does not exist
    """
    extension = os.path.splitext(path)[1].lower()
    if extension == ".txt":
        return _read_text(path)
    if extension == ".csv":
        return _read_pd_csv(path, header=header)
    raise ValueError(f"Unsupported corpus file type '{extension}' for {path}")


def load_corpus(name_or_path):
    """
    Returns a bundled corpus by name, or reads a corpus file.

    Lets configuration list bundled names and file paths side by side, e.g. a
    complete edition of the Cicero text in place of the bundled passage.

    Args:
        name_or_path (str): A key of `BUNDLED_CORPORA` or a .txt/.csv path

    Returns:
        str: The corpus text
    """
    if name_or_path in BUNDLED_CORPORA:
        return load_bundled(name_or_path)
    return read_corpus(name_or_path)


LOREM_IPSUM = load_bundled("lorem_ipsum")
LIBER_PRIMUS = load_bundled("liber_primus")
