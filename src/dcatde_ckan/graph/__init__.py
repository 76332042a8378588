"""Graph access helpers."""

from .accessor import GraphAccessor, RdflibGraphAccessor, iter_dataset_nodes, load_graph

__all__ = [
    "GraphAccessor",
    "RdflibGraphAccessor",
    "iter_dataset_nodes",
    "load_graph",
]
