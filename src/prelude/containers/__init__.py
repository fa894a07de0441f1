"""
Containers для prelude

Растущая последовательность с проверкой границ поверх list.
"""

from src.prelude.containers.sequence import Sequence

__all__ = [
    "Sequence",
]
