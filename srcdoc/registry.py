"""Group rendered fragments into Markdown output targets."""

from __future__ import annotations

from typing import Dict, Iterator, List

from .logging import get_logger
from .models import OutputTarget

TARGET_SUFFIX = ".md"

_LOGGER = get_logger("registry")


def resolve_target_name(input_path: str) -> str:
    """Map an input path to its output target name.

    Everything before the first ``.`` becomes the base name, so ``foo.c`` and
    ``foo.h`` share ``foo.md``. A path without any ``.`` keeps its full text as
    the base name.
    """
    dot = input_path.find(".")
    if dot == -1:
        _LOGGER.warning(
            "Input %s has no '.' separator; using the whole path as its output name", input_path
        )
        return input_path + TARGET_SUFFIX
    base = input_path[:dot]
    if not base or base.endswith(("/", "\\")):
        _LOGGER.warning(
            "Input %s has no file name before its first '.'; it maps to %s",
            input_path,
            base + TARGET_SUFFIX,
        )
    return base + TARGET_SUFFIX


def get_or_create_target(registry: OutputRegistry, name: str) -> OutputTarget:
    return registry.get_or_create_target(name)


def record_input(target: OutputTarget, input_path: str) -> None:
    """Remember that ``input_path`` contributed to ``target``; duplicates are kept."""
    target.input_file_names.append(input_path)


def insert_fragment(target: OutputTarget, raw_text: str, rendered_text: str) -> None:
    """Insert a fragment keyed by its raw text, overwriting an identical key."""
    if raw_text in target.fragments:
        _LOGGER.debug("Duplicate comment text in %s; keeping the latest rendering", target.name)
    target.fragments[raw_text] = rendered_text


class OutputRegistry:
    """Maps output target names to the targets accumulated during a run."""

    def __init__(self) -> None:
        self._targets: Dict[str, OutputTarget] = {}

    def get_or_create_target(self, name: str) -> OutputTarget:
        target = self._targets.get(name)
        if target is None:
            _LOGGER.debug("Creating output target %s", name)
            target = OutputTarget(name=name)
            self._targets[name] = target
        return target

    def target_for(self, input_path: str) -> OutputTarget:
        """Resolve, create if needed, and record ``input_path`` on its target."""
        target = self.get_or_create_target(resolve_target_name(input_path))
        self.record_input(target, input_path)
        return target

    def record_input(self, target: OutputTarget, input_path: str) -> None:
        record_input(target, input_path)

    def insert_fragment(self, target: OutputTarget, raw_text: str, rendered_text: str) -> None:
        insert_fragment(target, raw_text, rendered_text)

    def targets(self) -> List[OutputTarget]:
        """Return targets sorted by name for deterministic emission."""
        return [self._targets[name] for name in sorted(self._targets)]

    def names(self) -> List[str]:
        return sorted(self._targets)

    def __len__(self) -> int:
        return len(self._targets)

    def __contains__(self, name: object) -> bool:
        return name in self._targets

    def __getitem__(self, name: str) -> OutputTarget:
        return self._targets[name]

    def __iter__(self) -> Iterator[OutputTarget]:
        return iter(self.targets())


__all__ = [
    "OutputRegistry",
    "TARGET_SUFFIX",
    "get_or_create_target",
    "insert_fragment",
    "record_input",
    "resolve_target_name",
]
