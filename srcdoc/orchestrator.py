"""Pipeline orchestration: collect fragments from inputs, then write Markdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Dict, Iterable, List, Optional

from .config import DEFAULT_INDEX_FILENAME
from .emitters import DocumentEmitter, IndexEmitter
from .logging import get_logger
from .registry import OutputRegistry
from .renderer import SOURCE_ENCODING, SOURCE_ERRORS, comment_to_markdown, decode_comment
from .scanner import UnterminatedCommentError, iter_comments

OUTPUT_DIR_MODE = 0o755


class OutputPathError(RuntimeError):
    """Raised when an output target would be written outside the output directory."""


class OutputCollisionError(OutputPathError):
    """Raised when an output target has the same name as the index file."""


@dataclass
class RunResult:
    """Outcome of a documentation extraction run."""

    output_dir: Path
    paths: List[Path] = field(default_factory=list)
    dry_run: bool = False


class Orchestrator:
    """Coordinates scanning, aggregation and emission for a set of input files."""

    def __init__(
        self,
        *,
        allow_bang: bool = False,
        document_emitter: DocumentEmitter | None = None,
        index_emitter: IndexEmitter | None = None,
        index_filename: str = DEFAULT_INDEX_FILENAME,
    ) -> None:
        self.allow_bang = allow_bang
        self.document_emitter = document_emitter or DocumentEmitter()
        self.index_emitter = index_emitter or IndexEmitter()
        self.index_filename = index_filename
        self.logger = get_logger("orchestrator")

    def collect(
        self, paths: Iterable[str], registry: Optional[OutputRegistry] = None
    ) -> OutputRegistry:
        """Scan every input in order and merge its fragments into a registry."""
        registry = registry if registry is not None else OutputRegistry()
        for path in paths:
            self.extract_file(registry, path)
        return registry

    def extract_file(self, registry: OutputRegistry, path: str) -> None:
        """Read ``path``, render each documentation comment and record it."""
        self.logger.info("Reading %s", path)
        target = registry.target_for(path)
        buffer = Path(path).read_bytes()

        count = 0
        try:
            for comment_range in iter_comments(buffer, allow_bang=self.allow_bang):
                self.logger.debug(
                    "Documentation comment found at [%d,%d)", comment_range.start, comment_range.end
                )
                raw = decode_comment(buffer[comment_range.start : comment_range.end])
                rendered = comment_to_markdown(raw)
                self.logger.debug(
                    "-----Fragment (file=%s)-----\n%s-----(end fragment)-----",
                    target.name,
                    rendered,
                )
                registry.insert_fragment(target, raw, rendered)
                count += 1
        except UnterminatedCommentError as exc:
            raise UnterminatedCommentError(exc.start, path) from exc

        self.logger.info("Done reading %s (%d comments)", path, count)

    def render(self, registry: OutputRegistry) -> Dict[str, str]:
        """Return output file name to document text, index included."""
        if self.index_filename in registry:
            target = registry[self.index_filename]
            raise OutputCollisionError(
                f"Output target {target.name} (from {', '.join(target.input_file_names)}) "
                f"collides with the index file"
            )
        documents: Dict[str, str] = {}
        for target in registry.targets():
            documents[target.name] = self.document_emitter.render(target)
        documents[self.index_filename] = self.index_emitter.render(registry.targets())
        return documents

    def run(self, paths: Iterable[str], output_dir: Path | str, *, dry_run: bool = False) -> RunResult:
        """Extract documentation from ``paths`` and write it under ``output_dir``.

        Every input is scanned before anything is written, so a malformed input
        leaves the output directory untouched.
        """
        registry = self.collect(paths)
        documents = self.render(registry)
        output_root = Path(output_dir)
        planned = {name: _target_path(output_root, name) for name in documents}

        result = RunResult(output_dir=output_root, dry_run=dry_run)
        if dry_run:
            for name, destination in planned.items():
                self.logger.info("Would write %s", destination)
                result.paths.append(destination)
            return result

        self.logger.info("Making sure the output directory %s exists", output_root)
        output_root.mkdir(mode=OUTPUT_DIR_MODE, exist_ok=True)
        for name, destination in planned.items():
            if destination.parent != output_root:
                destination.parent.mkdir(mode=OUTPUT_DIR_MODE, parents=True, exist_ok=True)
            self.logger.info("Writing %s", destination)
            destination.write_bytes(documents[name].encode(SOURCE_ENCODING, errors=SOURCE_ERRORS))
            result.paths.append(destination)

        self.logger.info("Done writing %d markdown files", len(result.paths))
        return result


def _target_path(output_root: Path, name: str) -> Path:
    relative = PurePath(name)
    if relative.anchor:
        relative = relative.relative_to(relative.anchor)
    if not relative.parts or ".." in relative.parts:
        raise OutputPathError(f"Output name {name!r} does not resolve inside {output_root}")
    return output_root.joinpath(*relative.parts)


__all__ = [
    "OUTPUT_DIR_MODE",
    "Orchestrator",
    "OutputCollisionError",
    "OutputPathError",
    "RunResult",
]
