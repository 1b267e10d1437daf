"""Index document linking every output target."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from ..config import ConfigError
from ..models import OutputTarget

INDEX_TITLE = "Source Documentation Index"


def render_index(targets: Iterable[OutputTarget], title: str = INDEX_TITLE) -> str:
    """Return the default index layout: a heading then one link per target.

    ``targets`` may be an ``OutputRegistry``; entries are emitted by name.
    """
    lines: List[str] = [f"# {title}\n", "\n"]
    for name in sorted(target.name for target in targets):
        lines.append(f"* [{name}]({name})\n")
        lines.append("\n")
    return "".join(lines)


class IndexEmitter:
    """Renders the index with the built-in layout or a user Jinja2 template."""

    def __init__(self, template_path: Path | None = None, *, title: str | None = None) -> None:
        self.template_path = template_path
        self.title = title or INDEX_TITLE
        self._env = self._create_env(template_path)

    def render(self, targets: Iterable[OutputTarget]) -> str:
        ordered = sorted(targets, key=lambda target: target.name)
        if self._env is None or self.template_path is None:
            return render_index(ordered, self.title)
        try:
            template = self._env.get_template(self.template_path.name)
        except TemplateNotFound as exc:
            raise ConfigError(f"Index template not found: {self.template_path}") from exc
        return template.render(
            title=self.title,
            targets=[_template_context(target) for target in ordered],
        )

    @staticmethod
    def _create_env(template_path: Path | None) -> Environment | None:
        if template_path is None:
            return None
        loader = FileSystemLoader(str(template_path.parent))
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


def _template_context(target: OutputTarget) -> Dict[str, object]:
    return {
        "name": target.name,
        "input_file_names": list(target.input_file_names),
        "fragment_count": len(target.fragments),
    }


__all__ = ["INDEX_TITLE", "IndexEmitter", "render_index"]
