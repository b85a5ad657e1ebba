"""Train a triebpe vocabulary on a text file or Hugging Face dataset."""

import argparse
import logging
import time

from triebpe import BPETrainer, list_strategies
from triebpe.corpus import SPLITTERS, read_lines

# Configure logging to show INFO level and above.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S",
)


def load_dataset_lines(name: str, num_docs: int | None, splitter) -> list[tuple]:
    """Load up to `num_docs` documents and split each non-blank line into symbols."""
    from datasets import load_dataset

    print(f"Loading {name} …")
    ds = load_dataset(name, split="train")
    docs = ds[:num_docs]["text"] if num_docs is not None else ds["text"]
    return [splitter(line) for doc in docs for line in doc.splitlines() if line.strip()]


def main() -> None:
    """Parse arguments, train, and print a few tokenized lines."""
    parser = argparse.ArgumentParser(description="Train a triebpe vocabulary.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", type=str, help="UTF-8 text file, one word per line.")
    source.add_argument("--dataset", type=str, help="Hugging Face dataset name.")
    parser.add_argument(
        "--num-docs",
        type=int,
        default=None,
        help="Number of dataset documents to use (default: all).",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Maximum merge rounds, seed round included (default: until convergence).",
    )
    parser.add_argument("--vocab-size", type=int, default=None)
    parser.add_argument("--min-freq", type=int, default=1)
    parser.add_argument("--strategy", choices=list_strategies(), default="materialized")
    parser.add_argument("--symbols", choices=list(SPLITTERS), default="chars")
    parser.add_argument(
        "--show", type=int, default=10, help="Number of lines to print tokenized."
    )
    parser.add_argument("--verbose", action="store_true", help="Log every merge.")
    args = parser.parse_args()

    splitter = SPLITTERS[args.symbols]
    if args.input:
        words = list(read_lines(args.input, splitter=splitter))
    else:
        words = load_dataset_lines(args.dataset, args.num_docs, splitter)
    print(f"number of words {len(words):,}")

    trainer = BPETrainer(words, strategy=args.strategy)
    start = time.perf_counter()
    result = trainer.train(
        args.rounds,
        min_freq=args.min_freq,
        vocab_size=args.vocab_size,
        verbose=args.verbose,
    )
    elapsed = time.perf_counter() - start
    print(
        f"{result.rounds} rounds, {result.n_merges} merges, "
        f"vocab size {result.vocab_size:,} in {elapsed:.2f}s"
    )

    tokenizer = trainer.snapshot()
    for word in words[: args.show]:
        pieces = tokenizer.split(word)
        if args.symbols == "bytes":
            print(" ".join(bytes(p).decode("utf-8", errors="replace") for p in pieces))
        else:
            print(" ".join("".join(p) for p in pieces))


if __name__ == "__main__":
    main()
