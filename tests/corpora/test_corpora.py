import pytest
import pandas as pd
from lipsum.corpora import (
    BUNDLED_CORPORA,
    LIBER_PRIMUS,
    LOREM_IPSUM,
    load_bundled,
    load_corpus,
    read_corpus,
)
from lipsum.models.markov_chain import MarkovChain


def test_bundled_texts():
    assert LOREM_IPSUM.startswith("Lorem ipsum dolor sit amet")
    assert LOREM_IPSUM.split()[-1] == "laborum."
    assert LIBER_PRIMUS.startswith("Non eram nescius, Brute")
    assert "Sed ut perspiciatis" in LIBER_PRIMUS
    # The Cicero passage is the longer of the two
    assert len(LIBER_PRIMUS.split()) > len(LOREM_IPSUM.split())


def test_load_bundled():
    assert set(BUNDLED_CORPORA) == {"lorem_ipsum", "liber_primus"}
    assert load_bundled("lorem_ipsum") == LOREM_IPSUM
    assert load_bundled("liber_primus") == LIBER_PRIMUS


def test_load_bundled_unknown_name():
    with pytest.raises(ValueError, match="Unknown bundled corpus"):
        load_bundled("hamlet")


def test_read_corpus_text_file(tmp_path):
    path = tmp_path / "seed.txt"
    path.write_text("red green blue\nred green yellow\n", encoding="UTF-8")
    assert read_corpus(str(path)) == "red green blue\nred green yellow\n"


def test_read_corpus_csv_file(tmp_path):
    path = tmp_path / "comments.csv"
    path.write_text("hello world,positive\nthis is a test,neutral\n", encoding="UTF-8")
    assert read_corpus(str(path)) == "hello world\nthis is a test"


def test_read_corpus_csv_with_header(tmp_path):
    path = tmp_path / "comments.csv"
    path.write_text("comment,sentiment\nhello world,positive\n", encoding="UTF-8")
    assert read_corpus(str(path), header=0) == "hello world"


def test_read_corpus_csv_uses_first_column(mocker):
    mock_csv_data = {"column1": ["Hello world"], "column2": ["Extra data"]}
    mocker.patch("pandas.read_csv", return_value=pd.DataFrame(mock_csv_data))
    assert read_corpus("dummy_path.CSV") == "Hello world"

    # Empty CSV file
    mocker.patch("pandas.read_csv", return_value=pd.DataFrame(columns=["column1"]))
    assert read_corpus("dummy_path.csv") == ""


def test_read_corpus_unsupported_type(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text("{}")
    with pytest.raises(ValueError, match="Unsupported corpus file type"):
        read_corpus(str(path))


def test_read_corpus_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_corpus(str(tmp_path / "missing.txt"))


def test_read_corpus_csv_skips_blank_cells(tmp_path):
    path = tmp_path / "comments.csv"
    path.write_text("hello world,x\n,y\nfoo bar baz,z\n", encoding="UTF-8")
    assert read_corpus(str(path)) == "hello world\nfoo bar baz"


def test_read_corpus_empty_csv_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    assert read_corpus(str(path)) == ""


def test_load_corpus_by_name_or_path(tmp_path):
    assert load_corpus("lorem_ipsum") == LOREM_IPSUM

    path = tmp_path / "seed.txt"
    path.write_text("red green blue\n")
    assert load_corpus(str(path)) == "red green blue\n"


def test_liber_primus_gives_choices():
    chain = MarkovChain()
    chain.learn(LOREM_IPSUM)
    chain.learn(LIBER_PRIMUS)
    assert chain.lookup(("enim", "ad")) == ["minim", "sapientiam", "minima"]
    assert chain.lookup(("sed", "quia")) == ["consequuntur", "non"]
