"""triebpe: BPE vocabulary training with trie-based longest-prefix tokenization."""

from ._corpus import Word
from ._progress import disable_progress, enable_progress
from .parallel import ParallelMode, list_parallel_modes
from .strategy import (
    CorpusStrategy,
    MaterializedCorpus,
    RecomputedCorpus,
    get_strategy,
    list_strategies,
)
from .tokenizer import Tokenizer
from .trainer import BPETrainer, MergeOutcome, MergeResult, TrainingResult
from .trie import PrefixTrie
from .types import Span
from .vocab import Vocabulary

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("triebpe")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "BPETrainer",
    "MergeOutcome",
    "MergeResult",
    "TrainingResult",
    "Vocabulary",
    "Tokenizer",
    "PrefixTrie",
    "Span",
    "Word",
    "CorpusStrategy",
    "MaterializedCorpus",
    "RecomputedCorpus",
    "ParallelMode",
    "get_strategy",
    "list_strategies",
    "list_parallel_modes",
    "enable_progress",
    "disable_progress",
]
