"""Name search and text analysis benchmark.

Usage:
    python -m scripts.benchmark

Builds a synthetic user index and corpus, then measures:
- Index build time
- Prefix search latency (p50, p95, p99)
- N-gram extraction and TF-IDF ranking latency
"""

import random
import statistics
import sys
import time

sys.path.insert(0, ".")

from nameseek.config import settings
from nameseek.log import configure_logging
from nameseek.models.user import UserName
from nameseek.services.search.name_index import name_search, rebuild_name_index
from nameseek.services.search.tfidf import CorpusStats

FIRST_NAMES = [
    "Anna", "Andrew", "Ben", "Beatrice", "Carlos", "Chloe", "David", "Diana",
    "Elena", "Ethan", "Fatima", "George", "Hana", "Ivan", "Julia", "John",
    "Kenji", "Lucy", "Mohammed", "Nora", "Omar", "Priya", "Quentin", "Rosa",
]
LAST_NAMES = [
    "Anderson", "Brown", "Chen", "Diaz", "Evans", "Fischer", "Garcia", "Hughes",
    "Ivanova", "Johnson", "Kim", "Lopez", "Martin", "Nguyen", "Okafor", "Patel",
    "Qureshi", "Rossi", "Smith", "Tanaka", "Usman", "Varga", "Williams", "Young",
]
TEST_PREFIXES = ["a", "an", "Jo", "john", "sm", "NG", "qu", "x", "Rossi", "ta"]
TEST_QUERIES = [
    "morning run",
    "don't give up",
    "30 day challenge",
    "healthy breakfast ideas",
    "how about them",
]
WORDS = (
    "run walk swim bake read write morning evening day challenge healthy "
    "breakfast don't give up how about them ideas week goal streak"
).split()


def _report(label: str, latencies: list[float]) -> None:
    sorted_lat = sorted(latencies)
    print(f"\n{label} Latency:")
    print(f"  p50:  {sorted_lat[len(sorted_lat)//2]:8.3f} ms")
    print(f"  p95:  {sorted_lat[int(len(sorted_lat)*0.95)]:8.3f} ms")
    print(f"  p99:  {sorted_lat[-1]:8.3f} ms")
    print(f"  mean: {statistics.mean(latencies):8.3f} ms")


def main(user_count: int = 20000, doc_count: int = 2000):
    configure_logging()
    rng = random.Random(42)
    print(f"=== {settings.app_name} {settings.app_version} Benchmark ===\n")

    users = [
        UserName(rng.choice(FIRST_NAMES), f"{rng.choice(LAST_NAMES)}{i}")
        for i in range(user_count)
    ]
    start = time.time()
    rebuild_name_index(users)
    print(f"Built name index for {user_count} users in {(time.time() - start) * 1000:.1f}ms")

    search_latencies = []
    zero_result = 0
    print("\nRunning prefix search benchmark...")
    for prefix in TEST_PREFIXES:
        start = time.time()
        results = name_search(prefix, limit=10)
        elapsed = (time.time() - start) * 1000
        search_latencies.append(elapsed)
        if not results:
            zero_result += 1
        print(f"  [{elapsed:8.3f}ms] prefix='{prefix}' -> {len(results)} results")

    corpus = CorpusStats()
    start = time.time()
    for i in range(doc_count):
        text = " ".join(rng.choice(WORDS) for _ in range(rng.randint(5, 60)))
        corpus.add_document(f"post-{i}", text)
    print(f"\nTokenized {doc_count} posts in {(time.time() - start) * 1000:.1f}ms")

    rank_latencies = []
    print("\nRunning TF-IDF ranking benchmark...")
    for query in TEST_QUERIES:
        start = time.time()
        ranked = corpus.rank(query, limit=10)
        elapsed = (time.time() - start) * 1000
        rank_latencies.append(elapsed)
        top = ranked[0].document_id if ranked else "-"
        print(f"  [{elapsed:8.3f}ms] q='{query}' -> top={top}")

    print("\n=== Results ===")
    _report("Prefix search", search_latencies)
    _report("TF-IDF ranking", rank_latencies)
    print(f"\nZero-result prefixes: {zero_result}/{len(TEST_PREFIXES)}")
    print("Done.")


if __name__ == "__main__":
    main()
