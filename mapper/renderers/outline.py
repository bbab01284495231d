from __future__ import annotations

from ..model import DirectoryNode, FileEntry, OutputFormat
from .base import RenderContext, StreamingRenderer


class OutlineRenderer(StreamingRenderer):
	"""Bulleted plain-text outline, three spaces per nesting level."""

	format = OutputFormat.TEXT
	indent_width = 3
	error_markers_default = True

	def on_enter_directory(self, ctx: RenderContext, directory: DirectoryNode, depth: int) -> None:
		ctx.emit(f"* {directory.name}", depth)

	def on_file(self, ctx: RenderContext, entry: FileEntry, depth: int) -> None:
		ctx.emit(f"* {entry.name}", depth + 1)
		annotation = self.annotate(entry)
		if annotation is None:
			return
		if annotation.error:
			ctx.emit(f"! parse error: {annotation.error}", depth + 2)
		for unit in annotation.units:
			ctx.emit(f"* class {unit.name}", depth + 2)
			for method in unit.methods:
				ctx.emit(f"* method {method}", depth + 3)
