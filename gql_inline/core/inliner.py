"""Fragment inliner.

Expands every fragment spread in a document into the selections of the
fragment it names, merging overlapping field requests along the way.

Example:
    >>> print(inline('''
    ...     query Q { id account { id } ...F }
    ...     fragment F on T { id account { x } }
    ... '''))
    query Q {
      id
      account {
        id
        x
      }
    }
"""

import logging

from graphql import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    OperationDefinitionNode,
    SelectionNode,
    SelectionSetNode,
    parse,
    print_ast,
)

from .errors import (
    CyclicFragmentError,
    DuplicateFragmentError,
    UnresolvedFragmentError,
)
from .merge import merge_selections, with_selections

logger = logging.getLogger(__name__)


def build_fragment_map(
    document: DocumentNode, strict: bool = False
) -> dict[str, FragmentDefinitionNode]:
    """Map fragment names to their definitions.

    A repeated fragment name replaces the earlier definition, unless
    ``strict`` is set, in which case ``DuplicateFragmentError`` is raised.
    """
    fragment_map: dict[str, FragmentDefinitionNode] = {}
    for definition in document.definitions:
        if not isinstance(definition, FragmentDefinitionNode):
            continue
        name = definition.name.value
        if name in fragment_map:
            if strict:
                raise DuplicateFragmentError(name)
            logger.warning("Fragment %s is defined more than once; using the last definition", name)
        fragment_map[name] = definition
    return fragment_map


class FragmentInliner:
    """Inlines fragment spreads for a single document.

    An instance holds the fragment map and a cache of already expanded
    fragments; create a new one for every document.
    """

    def __init__(self, document: DocumentNode, strict: bool = False):
        self.document = document
        self.fragment_map = build_fragment_map(document, strict=strict)
        self._expanded: dict[str, list[SelectionNode]] = {}

    def inline(self) -> DocumentNode:
        """Return a new document holding only the fully expanded operations."""
        operations = [
            self._inline_node(definition, ())
            for definition in self.document.definitions
            if isinstance(definition, OperationDefinitionNode)
        ]
        logger.debug(
            "Inlined %d operation(s) using %d fragment(s)",
            len(operations),
            len(self._expanded),
        )
        return DocumentNode(definitions=tuple(operations))

    def _inline_node(self, node, path: tuple[str, ...]):
        if node.selection_set is None:
            return node
        return with_selections(
            node, self._inline_selection_set(node.selection_set, path)
        )

    def _inline_selection_set(
        self, selection_set: SelectionSetNode, path: tuple[str, ...]
    ) -> list[SelectionNode]:
        selections: list[SelectionNode] = []
        for selection in selection_set.selections:
            if isinstance(selection, FragmentSpreadNode):
                selections.extend(self._expand_fragment(selection.name.value, path))
            elif isinstance(selection, (FieldNode, InlineFragmentNode)):
                selections.append(self._inline_node(selection, path))
            else:
                selections.append(selection)
        return merge_selections(selections)

    def _expand_fragment(
        self, name: str, path: tuple[str, ...]
    ) -> list[SelectionNode]:
        """Return the inlined top-level selections of fragment ``name``."""
        if name in path:
            raise CyclicFragmentError([*path, name])
        if name in self._expanded:
            return self._expanded[name]

        fragment = self.fragment_map.get(name)
        if fragment is None:
            raise UnresolvedFragmentError(name)

        selections = self._inline_selection_set(fragment.selection_set, (*path, name))
        self._expanded[name] = selections
        return selections


def inline_fragments(document: DocumentNode, strict: bool = False) -> DocumentNode:
    """Inline all fragment spreads of ``document``.

    Raises:
        UnresolvedFragmentError: A spread names an undefined fragment.
        CyclicFragmentError: A fragment spreads itself.
        DuplicateFragmentError: ``strict`` is set and a fragment name repeats.
    """
    return FragmentInliner(document, strict=strict).inline()


def inline(text: str, strict: bool = False) -> str:
    """Parse ``text``, inline its fragments and print the result.

    ``graphql.GraphQLSyntaxError`` is raised unchanged for malformed input.
    """
    document = parse(text)
    return print_ast(inline_fragments(document, strict=strict))
