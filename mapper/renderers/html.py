from __future__ import annotations

import os

from jinja2 import Environment
from markupsafe import Markup, escape

from ..fs_scan import directory_name
from ..model import DirectoryNode, FileEntry, OutputFormat
from .base import RenderContext, StreamingRenderer


PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>
.tree-node { margin-left: 20px; }
.folder-label { cursor: pointer; font-weight: bold; }
.collapsed > .tree-node { display: none; }
.code-class { margin-left: 20px; color: #1f4e9c; font-family: monospace; }
.code-method { margin-left: 40px; color: #555; font-family: monospace; }
.parse-error { margin-left: 20px; color: #b00020; font-style: italic; }
</style>
<script>
function toggle(label) { label.parentElement.classList.toggle('collapsed'); }
</script>
</head>
<body>
{{ body }}
</body>
</html>
"""

_environment = Environment(autoescape=True, keep_trailing_newline=True)


class HtmlRenderer(StreamingRenderer):
	"""Self-contained page of collapsible folder blocks.

	Clicking a folder label hides or shows that folder's children.
	"""

	format = OutputFormat.HTML
	indent_width = 2
	error_markers_default = True

	def on_enter_directory(self, ctx: RenderContext, directory: DirectoryNode, depth: int) -> None:
		ctx.emit("<div class='folder'>", depth * 2)
		ctx.emit(
			f"<span class='folder-label' onclick='toggle(this)'>📁 {escape(directory.name)}</span>",
			depth * 2 + 1,
		)
		ctx.emit("<div class='tree-node'>", depth * 2 + 1)

	def on_file(self, ctx: RenderContext, entry: FileEntry, depth: int) -> None:
		level = depth * 2 + 2
		ctx.emit(f"<div class='file'>📄 {escape(entry.name)}</div>", level)
		annotation = self.annotate(entry)
		if annotation is None:
			return
		if annotation.error:
			ctx.emit(f"<div class='parse-error'>parse error: {escape(annotation.error)}</div>", level)
		for unit in annotation.units:
			ctx.emit(f"<div class='code-class'>class {escape(unit.name)}</div>", level)
			for method in unit.methods:
				ctx.emit(f"<div class='code-method'>{escape(method)}()</div>", level)

	def on_exit_directory(self, ctx: RenderContext, directory: DirectoryNode, depth: int) -> None:
		ctx.emit("</div>", depth * 2 + 1)
		ctx.emit("</div>", depth * 2)

	def finish(self, ctx: RenderContext, root: str) -> str:
		template = _environment.from_string(PAGE_TEMPLATE)
		return template.render(title=directory_name(os.path.abspath(root)), body=Markup("\n".join(ctx.lines)))
