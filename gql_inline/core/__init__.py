"""Core modules for fragment inlining and definition grouping."""

from .arguments import argument_key, canonical_value
from .compiler import CompileResult, RelayCompiler
from .config import InlineResult, RelayConfig
from .errors import (
    CompilerError,
    CyclicFragmentError,
    DuplicateFragmentError,
    InlineError,
    MalformedDefinitionError,
    SplitError,
    UnmatchedBraceError,
    UnresolvedFragmentError,
)
from .grouper import (
    FileRecord,
    MergedFile,
    filename_for,
    group_definitions,
    merge_file_records,
    to_file_records,
)
from .inliner import FragmentInliner, build_fragment_map, inline, inline_fragments
from .merge import merge_selections, selection_key
from .splitter import (
    DefinitionKind,
    DefinitionSplitter,
    RawDefinition,
    split_definitions,
)

__all__ = [
    # Arguments
    "argument_key",
    "canonical_value",
    # Merging
    "merge_selections",
    "selection_key",
    # Inliner
    "FragmentInliner",
    "build_fragment_map",
    "inline",
    "inline_fragments",
    # Splitter
    "DefinitionKind",
    "DefinitionSplitter",
    "RawDefinition",
    "split_definitions",
    # Grouper
    "FileRecord",
    "MergedFile",
    "filename_for",
    "group_definitions",
    "merge_file_records",
    "to_file_records",
    # Compiler
    "CompileResult",
    "RelayCompiler",
    # Config
    "InlineResult",
    "RelayConfig",
    # Errors
    "CompilerError",
    "CyclicFragmentError",
    "DuplicateFragmentError",
    "InlineError",
    "MalformedDefinitionError",
    "SplitError",
    "UnmatchedBraceError",
    "UnresolvedFragmentError",
]
