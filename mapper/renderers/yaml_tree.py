from __future__ import annotations

import yaml

from ..model import DirectoryNode, FileEntry, OutputFormat
from .base import RenderContext, StreamingRenderer


def yaml_scalar(text: str) -> str:
	"""``text`` as a YAML scalar, quoted only when plain style would misread it."""
	# flow-style list so pyyaml emits neither a document end marker nor a newline
	dumped = yaml.safe_dump([text], default_flow_style=True, allow_unicode=True, width=float("inf"))
	return dumped.strip()[1:-1]


class YamlRenderer(StreamingRenderer):
	"""YAML-styled outline: directories as keys, files as list items.

	Written line by line like the other outlines rather than dumped from a
	mapping, so subdirectories and files keep traversal order.
	"""

	format = OutputFormat.YAML
	indent_width = 2

	def on_enter_directory(self, ctx: RenderContext, directory: DirectoryNode, depth: int) -> None:
		ctx.emit(f"{yaml_scalar(directory.name)}:", depth)

	def on_file(self, ctx: RenderContext, entry: FileEntry, depth: int) -> None:
		ctx.emit(f"- {yaml_scalar(entry.name)}", depth + 1)
		annotation = self.annotate(entry)
		if annotation is None:
			return
		if annotation.error:
			ctx.emit(f"error: {yaml_scalar(annotation.error)}", depth + 3)
		for unit in annotation.units:
			ctx.emit(f"class: {yaml_scalar(unit.name)}", depth + 3)
			for method in unit.methods:
				ctx.emit(f"method: {yaml_scalar(method)}", depth + 4)
