"""Deduplicate and merge sibling selections.

Sibling selections that ask for the same data (same response name and
arguments, or the same inline type condition) are collapsed into one entry
whose nested selection set is the union of theirs. Combined nested sets are
merged recursively. A selection that occurs only once is returned as given,
so its nested set must already be merged; the inliner guarantees this by
merging bottom-up.
"""

from typing import Iterable

from graphql import (
    FieldNode,
    InlineFragmentNode,
    SelectionNode,
    SelectionSetNode,
    print_ast,
)

from .arguments import argument_key


def field_key(node: FieldNode) -> str:
    """Key a field by its response name and canonical arguments."""
    name = node.alias.value if node.alias else node.name.value
    return name + argument_key(node.arguments)


def inline_fragment_key(node: InlineFragmentNode) -> str:
    # Fragments without a type condition all share "inline:".
    type_name = node.type_condition.name.value if node.type_condition else ""
    return f"inline:{type_name}"


def selection_key(node: SelectionNode) -> str:
    """Return the merge key of a selection."""
    if isinstance(node, FieldNode):
        return field_key(node)
    if isinstance(node, InlineFragmentNode):
        return inline_fragment_key(node)
    return f"other:{node.kind}:{print_ast(node)}"


def replace_selection_set(node, selection_set: SelectionSetNode | None):
    """Return a new node like ``node`` but with ``selection_set``.

    Nodes are rebuilt rather than copied and assigned, since AST nodes are
    frozen in newer graphql-core releases.
    """
    attributes = {key: getattr(node, key) for key in node.keys}
    attributes["selection_set"] = selection_set
    return node.__class__(**attributes)


def with_selections(node, selections: Iterable[SelectionNode]):
    """Return a new node like ``node`` with the given selections."""
    return replace_selection_set(node, SelectionSetNode(selections=tuple(selections)))


def merge_selection_sets(
    first: SelectionSetNode | None, second: SelectionSetNode | None
) -> SelectionSetNode | None:
    """Union two selection sets; a missing set adopts the other one.

    The result is merged in either case, so an adopted set never keeps
    duplicate siblings.
    """
    if first is None and second is None:
        return None
    combined = [
        *(first.selections if first is not None else ()),
        *(second.selections if second is not None else ()),
    ]
    return SelectionSetNode(selections=tuple(merge_selections(combined)))


def merge_selections(selections: Iterable[SelectionNode]) -> list[SelectionNode]:
    """Merge a flat list of sibling selections.

    Output order is the order in which each key was first seen. When a key
    repeats, the first occurrence keeps its alias, arguments and directives
    and receives the merged selection set.
    """
    merged: dict[str, SelectionNode] = {}

    for selection in selections:
        key = selection_key(selection)
        existing = merged.get(key)
        if existing is None:
            merged[key] = selection
            continue

        if isinstance(selection, (FieldNode, InlineFragmentNode)):
            if existing.selection_set is None and selection.selection_set is None:
                continue
            merged_set = merge_selection_sets(
                existing.selection_set, selection.selection_set
            )
            merged[key] = replace_selection_set(existing, merged_set)

    return list(merged.values())
