# flopchain/config.py
"""
Configuration for the chain order optimizer
"""

from dataclasses import dataclass

from .errors import InvalidArgument


@dataclass(frozen=True)
class ChainConfig:
    """Optimizer options"""
    allow_empty: bool = True
    label_prefix: str = "M"
    operator: str = "*"
    warn_duplicate_names: bool = True

    def __post_init__(self):
        if not isinstance(self.label_prefix, str):
            raise InvalidArgument(f"Label prefix must be a string, got {type(self.label_prefix).__name__}")

        if not isinstance(self.operator, str) or not self.operator.strip():
            raise InvalidArgument("Operator token must be a non-empty string")

    def label(self, index: int) -> str:
        """Synthesized 1-based label for chain position ``index``."""
        return f"{self.label_prefix}{index + 1}"


DEFAULT_CONFIG = ChainConfig()
