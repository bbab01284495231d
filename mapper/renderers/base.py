from __future__ import annotations

from typing import List, Optional

from ..annotate import AnnotatorRegistry
from ..errors import ParseError
from ..exclusion import ExclusionPolicy
from ..fs_scan import build_tree, walk_tree
from ..model import Annotation, DirectoryNode, FileEntry, OutputFormat


class RenderContext:
	"""Append-only line buffer owned by a single ``render()`` call."""

	def __init__(self, indent_width: int = 0) -> None:
		self.indent_width = indent_width
		self.lines: List[str] = []

	def emit(self, text: str, level: int = 0) -> None:
		self.lines.append(" " * (level * self.indent_width) + text)

	def getvalue(self) -> str:
		if not self.lines:
			return ""
		return "\n".join(self.lines) + "\n"


class Renderer:
	format: OutputFormat
	# whether a failed annotation shows up in the document or is dropped
	error_markers_default = False

	def __init__(
		self,
		include_code_details: bool = False,
		policy: Optional[ExclusionPolicy] = None,
		annotators: Optional[AnnotatorRegistry] = None,
		error_markers: Optional[bool] = None,
		sort_entries: bool = False,
	) -> None:
		self.include_code_details = include_code_details
		self.policy = policy or ExclusionPolicy()
		self.annotators = annotators or AnnotatorRegistry()
		self.error_markers = self.error_markers_default if error_markers is None else error_markers
		self.sort_entries = sort_entries

	def render(self, root: str) -> str:
		raise NotImplementedError

	def annotate(self, entry: FileEntry) -> Optional[Annotation]:
		"""Code units for ``entry``, or ``None`` when there is nothing to show.

		Parse failures are turned into an error annotation or dropped, depending
		on ``error_markers``; they never propagate.
		"""
		if not self.include_code_details or not self.annotators.is_source(entry.extension):
			return None
		try:
			return Annotation(units=self.annotators.annotate_file(entry))
		except ParseError as exc:
			if self.error_markers:
				return Annotation(error=str(exc))
			return None

	def build_tree(self, root: str) -> DirectoryNode:
		return build_tree(root, self.policy, self.sort_entries)


class StreamingRenderer(Renderer):
	"""Renderer that writes lines while the tree is walked.

	Subclasses implement the three ``on_*`` hooks and may wrap the collected
	lines in ``finish``.
	"""

	indent_width = 0

	def render(self, root: str) -> str:
		ctx = RenderContext(self.indent_width)
		walk_tree(root, _ContextVisitor(self, ctx), self.policy, self.sort_entries)
		return self.finish(ctx, root)

	def finish(self, ctx: RenderContext, root: str) -> str:
		return ctx.getvalue()

	def on_enter_directory(self, ctx: RenderContext, directory: DirectoryNode, depth: int) -> None:
		pass

	def on_file(self, ctx: RenderContext, entry: FileEntry, depth: int) -> None:
		pass

	def on_exit_directory(self, ctx: RenderContext, directory: DirectoryNode, depth: int) -> None:
		pass


class _ContextVisitor:
	def __init__(self, renderer: StreamingRenderer, ctx: RenderContext) -> None:
		self.renderer = renderer
		self.ctx = ctx

	def enter_directory(self, directory: DirectoryNode, depth: int) -> None:
		self.renderer.on_enter_directory(self.ctx, directory, depth)

	def visit_file(self, entry: FileEntry, depth: int) -> None:
		self.renderer.on_file(self.ctx, entry, depth)

	def exit_directory(self, directory: DirectoryNode, depth: int) -> None:
		self.renderer.on_exit_directory(self.ctx, directory, depth)
