import re
import logging
from html import unescape

from bs4 import BeautifulSoup

from nameseek.config import settings

logger = logging.getLogger("nameseek.indexer.text_analyzer")


class TextAnalyzer:
    """Text preparation for relevance scoring: markup stripping,
    sanitization and n-gram frequency counting.

    The output is a plain bag of n-grams, so it can feed TF-IDF, BM25 or
    any other consumer without change. Instances hold no state.
    """

    # Anything that is not a letter, digit, whitespace or apostrophe.
    # \w also matches "_", which is not a letter.
    PUNCTUATION_PATTERN = re.compile(r"[^\w\s']|_")

    def html_to_text(self, html: str | None) -> str:
        """Strip HTML tags, scripts and styles from a rich post body."""
        if not html:
            return ""
        soup = BeautifulSoup(html, settings.html_parser)

        for tag in soup(["script", "style", "noscript"]):
            tag.decompose()

        text = soup.get_text(separator=" ", strip=True)
        text = re.sub(r"\s+", " ", text).strip()
        return unescape(text)

    def sanitize(self, text: str | None) -> str | None:
        """Lowercase ``text`` and delete all punctuation except apostrophes.

        Deleted characters are not replaced, so ``"D.on't"`` becomes
        ``"don't"``. Whitespace is left exactly as it was. ``None`` is
        passed through.
        """
        if text is None:
            return None
        return self.PUNCTUATION_PATTERN.sub("", text.lower())

    def tokenize(self, text: str | None) -> list[str]:
        """Sanitize and split on whitespace."""
        sanitized = self.sanitize(text)
        if not sanitized:
            return []
        return sanitized.split()

    @staticmethod
    def ngrams(tokens: list[str], n: int) -> list[str]:
        """Return every run of ``n`` adjacent tokens, space-joined."""
        if n < 1:
            return []
        return [" ".join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)]

    def ngram_tokenizer(
        self, text: str | None, max_order: int | None = None
    ) -> dict[str, int]:
        """Count unigrams, bigrams and trigrams of ``text`` in one map.

        Keys are ordered by n-gram size first (all unigrams, then bigrams,
        then trigrams), and by first occurrence within each size.
        """
        if max_order is None:
            max_order = settings.ngram_max_order
        tokens = self.tokenize(text)

        counts: dict[str, int] = {}
        for n in range(1, max_order + 1):
            for gram in self.ngrams(tokens, n):
                counts[gram] = counts.get(gram, 0) + 1
        return counts


analyzer = TextAnalyzer()


def sanitize(text: str | None) -> str | None:
    return analyzer.sanitize(text)


def ngram_tokenizer(text: str | None, max_order: int | None = None) -> dict[str, int]:
    return analyzer.ngram_tokenizer(text, max_order)
