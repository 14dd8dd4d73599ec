# tools/profile_trie.py
"""
Small profiling harness for Trie.auto_suggest and Trie.get_spelling_suggestions.
Usage:
  python tools/profile_trie.py --words /usr/share/dict/words --iters 500

Without --words a synthetic vocabulary is generated.
Prints mean/median/std latency per operation.
"""
import argparse
import random
import statistics
import string
import time

from trie_dictionary.core.trie import Trie
from trie_dictionary.utils.logger_utils import setup_logging, time_block


def synthetic_words(n, seed=0):
    rng = random.Random(seed)
    return ["".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(3, 10))) for _ in range(n)]


def measure(fn, queries, iters):
    latencies = []
    for _ in range(iters):
        q = random.choice(queries)
        t0 = time.perf_counter()
        fn(q)
        latencies.append((time.perf_counter() - t0) * 1000.0)  # ms
    return latencies


def report(label, latencies):
    print("%-8s (ms): mean=%.3f median=%.3f stdev=%.3f min=%.3f max=%.3f" % (
        label,
        statistics.mean(latencies),
        statistics.median(latencies),
        statistics.pstdev(latencies),
        min(latencies),
        max(latencies),
    ))


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", type=str, default=None, help="word list, one per line")
    parser.add_argument("--size", type=int, default=20000, help="synthetic vocabulary size")
    parser.add_argument("--iters", type=int, default=200, help="measured iterations")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()
    setup_logging(args.verbose)

    if args.words:
        with open(args.words, "r", encoding="utf8") as f:
            words = [ln.strip() for ln in f if ln.strip()]
    else:
        words = synthetic_words(args.size)

    trie = Trie()
    with time_block("build") as t:
        trie.insert_many(words)
    print(f"built {len(trie)} words / {trie.node_count()} nodes in {t.elapsed:.2f}s")

    sample = random.sample(words, min(len(words), 200))
    prefixes = [w[: max(1, len(w) // 2)] for w in sample]
    # drop the last letter to get a near miss
    typos = [w[:-1] if len(w) > 1 else w for w in sample]

    report("suggest", measure(trie.auto_suggest, prefixes, args.iters))
    report("spell", measure(trie.get_spelling_suggestions, typos, args.iters))


if __name__ == "__main__":
    main()
