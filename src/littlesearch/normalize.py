"""Turn raw whitespace-delimited tokens into canonical keywords."""

from collections.abc import Iterable
import re

PUNCTUATION = ".,?:;!"

_ALPHA_RE = re.compile(r"[a-zA-Z]+")


class Normalizer:
    def __init__(self, noise_words: Iterable[str] = ()) -> None:
        self.noise_words = frozenset(w.lower() for w in noise_words)

    def normalize(self, token: str) -> str | None:
        """Return the keyword for token, or None if it is not one.

        normalize("Rutgers.") -> "rutgers"
        normalize("HELLO!!")  -> "hello"
        normalize("can't")    -> None
        normalize("...")      -> None
        """
        stripped = token.rstrip(PUNCTUATION)
        if not stripped:
            return None
        if not _ALPHA_RE.fullmatch(stripped):
            return None
        keyword = stripped.lower()
        if keyword in self.noise_words:
            return None
        return keyword
