"""Narrow read access to an RDF graph.

The mapper only ever asks three questions of a node: what is the single value of a
property, which node does a property point to, and which values does a
multi-valued property carry. ``GraphAccessor`` captures exactly that, and
``RdflibGraphAccessor`` answers it from an ``rdflib.Graph``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator, Protocol

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.util import guess_format

from dcatde_ckan.core.logging import get_logger
from dcatde_ckan.core.models import GraphValue
from dcatde_ckan.core.vocab import DCAT, RDF, namespaces

LOGGER = get_logger(__name__)


class GraphAccessor(Protocol):
    def identifier(self, node: Any) -> str | None: ...

    def value(self, node: Any, predicate: Any) -> str | None: ...

    def node(self, node: Any, predicate: Any) -> Any | None: ...

    def values(self, node: Any, predicate: Any) -> list[GraphValue]: ...

    def nodes(self, node: Any, predicate: Any) -> list[Any]: ...


class RdflibGraphAccessor:
    """``GraphAccessor`` backed by an rdflib graph."""

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    @property
    def graph(self) -> Graph:
        return self._graph

    def identifier(self, node: Any) -> str | None:
        if isinstance(node, URIRef):
            return str(node)
        return None

    def value(self, node: Any, predicate: Any) -> str | None:
        """Return literal text or URI of one object of ``predicate``; ``None`` when absent."""
        if node is None:
            return None
        obj = self._graph.value(node, predicate)
        if obj is None:
            return None
        return _as_text(obj)

    def node(self, node: Any, predicate: Any) -> URIRef | BNode | None:
        if node is None:
            return None
        for obj in self._graph.objects(node, predicate):
            if isinstance(obj, (URIRef, BNode)):
                return obj
        return None

    def values(self, node: Any, predicate: Any) -> list[GraphValue]:
        if node is None:
            return []
        collected: list[GraphValue] = []
        for obj in self._graph.objects(node, predicate):
            if isinstance(obj, Literal):
                datatype = str(obj.datatype) if obj.datatype is not None else None
                collected.append(GraphValue(text=str(obj), datatype=datatype, is_literal=True))
            elif isinstance(obj, URIRef):
                collected.append(GraphValue(text=str(obj), is_literal=False))
            else:
                LOGGER.debug("graph.blank_value_skipped", node=str(node), predicate=str(predicate))
        return collected

    def nodes(self, node: Any, predicate: Any) -> list[URIRef | BNode]:
        if node is None:
            return []
        return [obj for obj in self._graph.objects(node, predicate) if isinstance(obj, (URIRef, BNode))]


def _as_text(obj: Any) -> str | None:
    if isinstance(obj, (Literal, URIRef)):
        return str(obj)
    return None


def load_graph(path: Path, rdf_format: str | None = None) -> Graph:
    """Parse an RDF file into a fresh graph."""
    if not path.exists():
        raise SystemExit(f"RDF source not found: {path}")
    resolved_format = rdf_format or guess_format(str(path)) or "turtle"
    graph = Graph()
    for prefix, namespace in namespaces.items():
        graph.bind(prefix, namespace)
    graph.parse(path, format=resolved_format)
    LOGGER.info("graph.loaded", path=str(path), format=resolved_format, triples=len(graph))
    return graph


def iter_dataset_nodes(graph: Graph) -> Iterator[URIRef | BNode]:
    """Yield every ``dcat:Dataset`` subject of the graph."""
    yield from graph.subjects(RDF.type, DCAT.Dataset)
