"""
Camada de deep-merge do yang-lang.

Composição recursiva de mapas aninhados com precedência explícita:
mapas são mesclados, folhas em conflito são resolvidas por um combiner
fornecido pelo chamador (`last_wins` por padrão).
"""

from .deep import Combiner, deep_merge_with, last_wins, merge_maps
from .kinds import NodeKind, node_kind

__all__ = [
    "Combiner",
    "NodeKind",
    "deep_merge_with",
    "last_wins",
    "merge_maps",
    "node_kind",
]
