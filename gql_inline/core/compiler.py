"""Run the relay compiler over split operations.

The compiler works on a throwaway directory laid out as:

    <workspace>/
        src/                 grouped operation files (one per destination)
        schema.graphql       the type schema
        output/              generated artifacts
        relay.config.json    compiler configuration
"""

import logging
import shlex
import shutil
import subprocess
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from .config import RelayConfig
from .errors import CompilerError
from .grouper import MergedFile, group_definitions
from .splitter import split_definitions

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "npx relay-compiler"
CONFIG_FILENAME = "relay.config.json"


@dataclass
class CompileResult:
    """Output of a relay compiler run."""
    stdout: str
    stderr: str
    # Artifact filename -> contents
    results: dict[str, str] = field(default_factory=dict)


class RelayCompiler:
    """Prepares a workspace and invokes the relay compiler in it."""

    def __init__(
        self,
        command: str = DEFAULT_COMMAND,
        config: RelayConfig | None = None,
        timeout: float | None = None,
    ):
        """Initialize the compiler.

        Args:
            command: Shell-style command line that runs the relay compiler
            config: Workspace configuration (defaults to javascript output)
            timeout: Seconds to wait for the compiler before giving up
        """
        self.command = shlex.split(command)
        self.config = config or RelayConfig()
        self.timeout = timeout

    def prepare_workspace(
        self, root: Path, schema: str, operations: str
    ) -> list[MergedFile]:
        """Write sources, schema and configuration under ``root``.

        Operations are split and grouped before anything is written, so a
        malformed operations document leaves ``root`` untouched.
        """
        files = group_definitions(
            split_definitions(operations), extension=self.config.extension
        )

        src_dir = root / self.config.src
        output_dir = root / self.config.artifact_directory
        src_dir.mkdir(parents=True, exist_ok=True)
        output_dir.mkdir(parents=True, exist_ok=True)

        for merged in files:
            (src_dir / merged.filename).write_text(merged.content)
        (root / self.config.schema_path).write_text(schema)
        (root / CONFIG_FILENAME).write_text(self.config.to_json())

        logger.debug(
            "Prepared workspace %s with sources: %s",
            root,
            ", ".join(f.filename for f in files),
        )
        return files

    def compile(self, schema: str, operations: str) -> CompileResult:
        """Compile ``operations`` against ``schema`` and collect the artifacts."""
        temp_dir = Path(tempfile.mkdtemp(prefix="relay-compiler-"))
        try:
            self.prepare_workspace(temp_dir, schema, operations)
            stdout, stderr = self._run(temp_dir)
            return CompileResult(
                stdout=stdout,
                stderr=stderr,
                results=self._collect_artifacts(temp_dir / self.config.artifact_directory),
            )
        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)

    def _run(self, cwd: Path) -> tuple[str, str]:
        logger.info("Running %s in %s", shlex.join(self.command), cwd)
        try:
            completed = subprocess.run(
                self.command,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise CompilerError(f"Relay compiler not found: {e.filename}") from e
        except subprocess.TimeoutExpired as e:
            raise CompilerError(
                f"Relay compiler timed out after {e.timeout} seconds"
            ) from e

        if completed.returncode != 0:
            raise CompilerError(
                f"Relay compiler exited with code {completed.returncode}",
                stdout=completed.stdout,
                stderr=completed.stderr,
            )
        return completed.stdout, completed.stderr

    @staticmethod
    def _collect_artifacts(output_dir: Path) -> dict[str, str]:
        if not output_dir.is_dir():
            return {}
        return {
            path.name: path.read_text()
            for path in sorted(output_dir.iterdir())
            if path.is_file()
        }
