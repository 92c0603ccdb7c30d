# corpus.py - turns a corpus file into the character sequence the trainer consumes


def read_corpus(path: str, encoding: str = "utf-8") -> str:
    """
    Read the whole file as text. Newline translation is off, so "\\r\\n" stays two
    characters and every character of the file takes part in training.
    """
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()
