"""LeakGuard - pre-commit secret leak scanner."""

__version__ = "0.1.0"

from leakguard.core.models import (
    ExclusionSets,
    Finding,
    PatternRule,
)
from leakguard.core.walker import TreeWalker, scan_tree
from leakguard.utils.config import ScanConfig, load_config

__all__ = [
    "ExclusionSets",
    "Finding",
    "PatternRule",
    "ScanConfig",
    "TreeWalker",
    "load_config",
    "scan_tree",
    "__version__",
]
