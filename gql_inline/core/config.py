"""Configuration and result models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Language = Literal["javascript", "typescript", "flow"]

LANGUAGE_EXTENSIONS = {
    "javascript": ".js",
    "typescript": ".ts",
    "flow": ".js",
}


class RelayConfig(BaseModel):
    """Contents of ``relay.config.json`` for a compiler workspace.

    Paths are relative to the workspace root.
    """

    model_config = ConfigDict(populate_by_name=True)

    src: str = "./src"
    schema_path: str = Field(default="./schema.graphql", alias="schema")
    artifact_directory: str = Field(default="./output", alias="artifactDirectory")
    language: Language = "javascript"

    @property
    def extension(self) -> str:
        """File extension for source files written into ``src``."""
        return LANGUAGE_EXTENSIONS[self.language]

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


class InlineResult(BaseModel):
    """JSON envelope returned by ``gql-inline inline --json``."""

    success: bool
    result: str | None = None
    error: str | None = None

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True, indent=2)
