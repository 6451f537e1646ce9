"""Usage resolver: which registered fragments a document depends on.

Walks fragment spreads depth first. Spreads in the document itself are at
depth 0; spreads found inside a registered fragment's body are one level
deeper than that fragment.
"""

from collections.abc import Mapping
from typing import Any

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    Node,
    Visitor,
    visit,
)

from .ir import FragmentRegistryEntry


class _SpreadCollector(Visitor):
    """Collects fragment spread names in document order."""

    def __init__(self):
        super().__init__()
        self.names: list[str] = []

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args: Any) -> None:
        self.names.append(node.name.value)


def collect_spreads(node: Node) -> list[str]:
    """Names of all fragments spread anywhere inside ``node``."""
    collector = _SpreadCollector()
    visit(node, collector)
    return collector.names


def local_fragment_names(node: Node) -> set[str]:
    """Fragments defined by ``node`` itself, which never count as external."""
    if isinstance(node, FragmentDefinitionNode):
        return {node.name.value}
    if isinstance(node, DocumentNode):
        return {
            d.name.value for d in node.definitions
            if isinstance(d, FragmentDefinitionNode)
        }
    return set()


def extract_external_fragments_in_use(
    document: Node,
    registry: Mapping[str, FragmentRegistryEntry],
) -> dict[str, int]:
    """Map each registered fragment reachable from ``document`` to its depth.

    A fragment reachable along several paths keeps its smallest depth and
    the position of its first discovery. Spreads of unregistered fragments
    are ignored, and a fragment already on the current spread path is not
    entered again, so cyclic spreads terminate.
    """
    result: dict[str, int] = {}

    def walk(node: Node, level: int, path: frozenset[str]) -> None:
        ignored = local_fragment_names(node)
        for name in collect_spreads(node):
            if name in ignored or name in path:
                continue
            entry = registry.get(name)
            if entry is None:
                continue
            known = result.get(name)
            if known is not None and known <= level:
                continue
            result[name] = level
            walk(entry.definition, level + 1, path | {name})

    walk(document, 0, frozenset())
    return result
