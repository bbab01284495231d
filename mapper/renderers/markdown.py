from __future__ import annotations

import re

from ..model import DirectoryNode, FileEntry, OutputFormat
from .base import RenderContext, StreamingRenderer

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_\[\]<>#|~])")


def escape_markdown(text: str) -> str:
	"""Backslash-escape characters Markdown would read as emphasis, links or HTML."""
	return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def _heading(level: int, text: str) -> str:
	return f"{'#' * level} {text}"


class MarkdownRenderer(StreamingRenderer):
	"""One heading per directory (depth + 1 hashes), files as list items.

	Classes get a heading one level below the directory's subdirectories and
	methods one level below that.
	"""

	format = OutputFormat.MARKDOWN
	error_markers_default = True

	def on_enter_directory(self, ctx: RenderContext, directory: DirectoryNode, depth: int) -> None:
		ctx.emit(_heading(depth + 1, escape_markdown(directory.name)))

	def on_file(self, ctx: RenderContext, entry: FileEntry, depth: int) -> None:
		name = escape_markdown(entry.name)
		ctx.emit(f"- {name}")
		annotation = self.annotate(entry)
		if annotation is None:
			return
		if annotation.error:
			ctx.emit(f"> parse error in {name}: {escape_markdown(annotation.error)}")
		for unit in annotation.units:
			ctx.emit(_heading(depth + 2, f"class {escape_markdown(unit.name)}"))
			for method in unit.methods:
				ctx.emit(_heading(depth + 3, f"method {escape_markdown(method)}"))
