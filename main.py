import logging

import triebpe


def main() -> None:
    """Train on a toy word and print its segmentation."""
    logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")

    word = "ABCDCDABCDCDE"
    trainer = triebpe.BPETrainer([word])
    result = trainer.train(4, verbose=True, show_progress=False)
    print(f"rounds: {result.rounds}, vocab size: {result.vocab_size}")

    tokenizer = trainer.snapshot()
    print(" ".join(tokenizer.split(word)))


if __name__ == "__main__":
    main()
