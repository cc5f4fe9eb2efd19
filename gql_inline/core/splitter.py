"""Split raw text into named query and fragment definitions.

The splitter does not parse the query language. It looks for the
``query`` and ``fragment`` keywords, reads the name that follows and takes
everything up to the matching closing brace as the definition's source.
Any other text between definitions is ignored.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from .errors import MalformedDefinitionError, UnmatchedBraceError

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")


class DefinitionKind(Enum):
    """Kinds of definitions recognized by the splitter."""
    QUERY = "query"
    FRAGMENT = "fragment"


class ScanState(Enum):
    SCANNING = "scanning"
    IN_NAME = "in_name"
    IN_BODY = "in_body"


@dataclass(frozen=True)
class RawDefinition:
    """A definition as it appears in the source text."""
    kind: DefinitionKind
    name: str
    content: str


class DefinitionSplitter:
    """Scans text for definitions using brace-depth matching."""

    KEYWORDS = (DefinitionKind.QUERY, DefinitionKind.FRAGMENT)

    def __init__(self, text: str):
        self.text = text
        self.index = 0
        self.state = ScanState.SCANNING
        self.definitions: list[RawDefinition] = []
        # Definition currently being scanned
        self._kind: DefinitionKind | None = None
        self._name = ""
        self._start = 0

    def split(self) -> list[RawDefinition]:
        """Run the scanner to the end of the input."""
        length = len(self.text)
        while self.index < length:
            if self.state is ScanState.SCANNING:
                self._scan()
            elif self.state is ScanState.IN_NAME:
                self._read_name()
            else:
                self._read_body()

        if self.state is ScanState.IN_BODY:
            raise UnmatchedBraceError(self._name)
        if self.state is ScanState.IN_NAME:
            if not self._name:
                raise MalformedDefinitionError(self.index)
            logger.debug("Definition %s has no body; skipped", self._name)
        return self.definitions

    def _skip_whitespace(self):
        while self.index < len(self.text) and self.text[self.index].isspace():
            self.index += 1

    def _scan(self):
        self._skip_whitespace()
        if self.index >= len(self.text):
            return

        for kind in self.KEYWORDS:
            if self.text.startswith(kind.value, self.index):
                self._kind = kind
                self._name = ""
                self._start = self.index
                self.index += len(kind.value)
                self.state = ScanState.IN_NAME
                return
        self.index += 1

    def _read_name(self):
        self._skip_whitespace()
        match = NAME_PATTERN.match(self.text, self.index)
        if not match:
            raise MalformedDefinitionError(self.index)
        self._name = match.group(0)

        # Skip variable definitions or a type condition up to the body.
        brace = self.text.find("{", match.end())
        if brace == -1:
            self.index = len(self.text)
            return
        self.index = brace
        self.state = ScanState.IN_BODY

    def _read_body(self):
        depth = 0
        for position in range(self.index, len(self.text)):
            char = self.text[position]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    self._emit(position)
                    return
        self.index = len(self.text)

    def _emit(self, end: int):
        definition = RawDefinition(
            kind=self._kind,
            name=self._name,
            content=self.text[self._start:end + 1],
        )
        logger.debug("Found %s %s", definition.kind.value, definition.name)
        self.definitions.append(definition)
        self.index = end + 1
        self.state = ScanState.SCANNING


def split_definitions(text: str) -> list[RawDefinition]:
    """Split ``text`` into definitions in source order.

    Raises:
        MalformedDefinitionError: A keyword is not followed by a name.
        UnmatchedBraceError: The input ends inside a definition body.
    """
    return DefinitionSplitter(text).split()
