import logging
import math
from collections import Counter
from dataclasses import dataclass

from nameseek.services.indexer.text_analyzer import analyzer as text_analyzer

logger = logging.getLogger("nameseek.search.tfidf")


@dataclass
class ScoredDocument:
    document_id: str
    score: float


class CorpusStats:
    """In-memory n-gram statistics for a collection of documents.

    Holds each document's n-gram frequency map together with the
    collection-wide document frequencies needed for IDF. Like the name
    trie, it expects a single writer.
    """

    def __init__(self, max_order: int | None = None):
        self.max_order = max_order
        self._documents: dict[str, dict[str, int]] = {}
        self._doc_freq: Counter[str] = Counter()

    def add_document(self, doc_id: str, text: str | None) -> dict[str, int]:
        """Tokenize ``text`` and index it under ``doc_id``.

        Re-adding an existing id replaces the previous entry.
        """
        if doc_id in self._documents:
            self.remove_document(doc_id)

        counts = text_analyzer.ngram_tokenizer(text, self.max_order)
        self._documents[doc_id] = counts
        self._doc_freq.update(counts.keys())
        logger.debug("Indexed document %s: %d distinct n-grams", doc_id, len(counts))
        return counts

    def remove_document(self, doc_id: str) -> None:
        counts = self._documents.pop(doc_id, None)
        if counts is None:
            return
        self._doc_freq.subtract(counts.keys())
        # Counter.subtract keeps zero entries around
        for term in counts:
            if self._doc_freq[term] <= 0:
                del self._doc_freq[term]

    @property
    def document_count(self) -> int:
        return len(self._documents)

    def document_frequency(self, term: str) -> int:
        return self._doc_freq.get(term, 0)

    def idf(self, term: str) -> float:
        """Smoothed inverse document frequency.

        idf(t) = ln((1 + N) / (1 + df(t))) + 1, which stays positive even
        for terms present in every document.
        """
        n = self.document_count
        return math.log((1 + n) / (1 + self.document_frequency(term))) + 1

    def tfidf_vector(self, counts: dict[str, int]) -> dict[str, float]:
        """Weight an n-gram frequency map by term frequency times IDF."""
        total = sum(counts.values())
        if total == 0:
            return {}
        return {term: (count / total) * self.idf(term) for term, count in counts.items()}

    def score(self, query: str, doc_id: str) -> float:
        """Sum the document's TF-IDF weights over the distinct query n-grams."""
        counts = self._documents.get(doc_id)
        if not counts:
            return 0.0
        query_terms = text_analyzer.ngram_tokenizer(query, self.max_order)
        return self._score_counts(counts, query_terms)

    def _score_counts(self, counts: dict[str, int], query_terms: dict[str, int]) -> float:
        weights = self.tfidf_vector(counts)
        return round(sum(weights.get(term, 0.0) for term in query_terms), 4)

    def rank(self, query: str, limit: int = 10) -> list[ScoredDocument]:
        """Rank indexed documents against ``query``.

        Documents sharing no n-gram with the query are left out.
        """
        query_terms = text_analyzer.ngram_tokenizer(query, self.max_order)
        if not query_terms:
            return []

        scores: list[ScoredDocument] = []
        for doc_id, counts in self._documents.items():
            if not any(term in counts for term in query_terms):
                continue
            score = self._score_counts(counts, query_terms)
            scores.append(ScoredDocument(document_id=doc_id, score=score))

        scores.sort(key=lambda x: (-x.score, x.document_id))
        return scores[:limit]
