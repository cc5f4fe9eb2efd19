"""Group split definitions into per-file source modules.

Definitions are assigned to files by naming convention:

    NavigationQuery            -> Navigation.js
    PermissionsProvider_user   -> PermissionsProvider.js

Files are ordered by name; inside a file queries come before fragments and
definitions of the same kind are ordered by their source text, so the output
does not depend on the order of the input.
"""

from dataclasses import dataclass
from itertools import groupby
from typing import Iterable

from jinja2 import Environment, PackageLoader, select_autoescape

from .splitter import DefinitionKind, RawDefinition

DEFAULT_EXTENSION = ".js"
QUERY_SUFFIX = "Query"
SOURCE_TEMPLATE = "source.js.j2"

_env = Environment(
    loader=PackageLoader("gql_inline", "templates"),
    autoescape=select_autoescape(),
)


@dataclass(frozen=True)
class FileRecord:
    """A definition together with its destination file."""
    filename: str
    kind: DefinitionKind
    content: str


@dataclass(frozen=True)
class MergedFile:
    """Rendered contents of one destination file."""
    filename: str
    content: str


def filename_for(
    kind: DefinitionKind, name: str, extension: str = DEFAULT_EXTENSION
) -> str:
    """Derive the destination filename of a definition."""
    if kind is DefinitionKind.QUERY:
        base = name[:-len(QUERY_SUFFIX)] if name.endswith(QUERY_SUFFIX) else name
    else:
        base = name.split("_", 1)[0]
    return base + extension


def to_file_records(
    definitions: Iterable[RawDefinition], extension: str = DEFAULT_EXTENSION
) -> list[FileRecord]:
    return [
        FileRecord(
            filename=filename_for(d.kind, d.name, extension),
            kind=d.kind,
            content=d.content,
        )
        for d in definitions
    ]


def _sort_key(record: FileRecord) -> tuple:
    return (
        record.filename,
        0 if record.kind is DefinitionKind.QUERY else 1,
        record.content,
    )


def render_source(records: list[FileRecord]) -> str:
    """Wrap each record in a ``graphql`...``` tag, one per line."""
    return _env.get_template(SOURCE_TEMPLATE).render(records=records)


def merge_file_records(records: Iterable[FileRecord]) -> list[MergedFile]:
    """Group records by filename and render each group."""
    ordered = sorted(records, key=_sort_key)
    return [
        MergedFile(filename=filename, content=render_source(list(group)))
        for filename, group in groupby(ordered, key=lambda r: r.filename)
    ]


def group_definitions(
    definitions: Iterable[RawDefinition], extension: str = DEFAULT_EXTENSION
) -> list[MergedFile]:
    """Assign definitions to files and render the merged files in name order."""
    return merge_file_records(to_file_records(definitions, extension))
