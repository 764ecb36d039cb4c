from pathlib import Path

from hint_engine.vocab import WordVocab


def load_vocab(path: str, column: str = "word", *, answers_only: bool = False) -> WordVocab:
    """
    Load a vocabulary, picking the loader from the file suffix.

    .csv files go through pandas (`column` holds the words; with
    `answers_only`, only rows where 'day' is set are kept). Anything else is
    read as one word per line.
    """
    if Path(path).suffix.lower() == ".csv":
        return WordVocab.from_csv(path, column=column, answers_only=answers_only)
    return WordVocab.from_text(path)
