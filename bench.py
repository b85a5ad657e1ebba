"""Compare training time of the corpus strategies and tokenize throughput."""

import argparse
import time

from triebpe import BPETrainer, list_strategies


def make_words(target_kb: int) -> list[str]:
    """Build deterministic synthetic words close to target size."""
    seed = (
        "The wormhole shimmered above Titan while engines hummed in sync. "
        "Captain Rao logged coordinates and the archive AI cross-checked stellar drift. "
        "Quantum relays pulsed, translating static into maps for the next jump. "
    )
    target_chars = target_kb * 1024
    repeat = max(1, target_chars // len(seed) + 1)
    text = (seed * repeat)[:target_chars]
    return text.split()


def measure(name: str, fn) -> float:
    """Run one benchmark case and print elapsed time."""
    start = time.perf_counter()
    fn()
    elapsed = time.perf_counter() - start
    print(f"{name:<30} {elapsed:>10.3f}s")
    return elapsed


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark triebpe strategies.")
    parser.add_argument("--size-kb", type=int, default=64)
    parser.add_argument("--rounds", type=int, default=200)
    args = parser.parse_args()

    words = make_words(args.size_kb)
    total_chars = sum(len(w) for w in words)
    print(f"{len(words):,} words, {total_chars:,} chars, {args.rounds} rounds\n")

    trainers: dict[str, BPETrainer] = {}
    for name in list_strategies():
        trainer = BPETrainer(words, strategy=name)
        measure(
            f"train ({name})",
            lambda: trainer.train(args.rounds, show_progress=False),
        )
        trainers[name] = trainer

    tokenizer = trainers["materialized"].snapshot()
    for mode in ("off", "batch"):
        elapsed = measure(
            f"tokenize_batch ({mode})",
            lambda: tokenizer.tokenize_batch(words, parallel_mode=mode),
        )
        print(f"{'':<30} {total_chars / elapsed:>12,.0f} chars/s")


if __name__ == "__main__":
    main()
