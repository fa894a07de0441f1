"""
Tagged unions для prelude

Закрытые sum types с runtime-тегом и форматированием активной альтернативы.
"""

from src.prelude.unions.tagged_union import TaggedUnion

__all__ = [
    "TaggedUnion",
]
