"""CLI helpers exposed for other modules."""

from .prompts import collect_answers
from .ui import select_with_arrows

__all__ = ["collect_answers", "select_with_arrows"]
