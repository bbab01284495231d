from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from ..model import DirectoryNode, FileEntry, OutputFormat
from .base import Renderer


# opening/closing delimiters per node kind
SHAPES = {
	"directory": ("[", "]"),
	"file": ("(", ")"),
	"class": ("[[", "]]"),
	"method": ("([", "])"),
	"error": (">", "]"),
}


class GraphNode(BaseModel):
	id: int
	label: str
	kind: str


class GraphEdge(BaseModel):
	source: int
	target: int
	label: Optional[str] = None
	dotted: bool = False


def escape_label(label: str) -> str:
	return label.replace('"', "#quot;")


class MermaidGraph:
	"""Arena of nodes addressed by integer ids, kept apart from their labels."""

	def __init__(self) -> None:
		self.nodes: List[GraphNode] = []
		self.edges: List[GraphEdge] = []

	def add_node(self, label: str, kind: str) -> int:
		node = GraphNode(id=len(self.nodes), label=label, kind=kind)
		self.nodes.append(node)
		return node.id

	def connect(self, source: int, target: int, label: Optional[str] = None, dotted: bool = False) -> None:
		self.edges.append(GraphEdge(source=source, target=target, label=label, dotted=dotted))

	@staticmethod
	def node_id(index: int) -> str:
		return f"n{index}"

	def node_ref(self, index: int) -> str:
		node = self.nodes[index]
		opening, closing = SHAPES[node.kind]
		return f'{self.node_id(index)}{opening}"{escape_label(node.label)}"{closing}'

	def to_lines(self) -> List[str]:
		lines = ["graph TD"]
		if self.nodes:
			lines.append(f"    {self.node_ref(0)}")
		for edge in self.edges:
			arrow = "-.->" if edge.dotted else "-->"
			if edge.label:
				arrow = f"{arrow}|{edge.label}|"
			lines.append(f"    {self.node_id(edge.source)} {arrow} {self.node_ref(edge.target)}")
		return lines


class MermaidRenderer(Renderer):
	"""``graph TD`` flowchart with one edge per parent/child pair."""

	format = OutputFormat.MERMAID

	def render(self, root: str) -> str:
		graph = MermaidGraph()
		self._add_directory(graph, self.build_tree(root), None)
		return "\n".join(graph.to_lines()) + "\n"

	def _add_directory(self, graph: MermaidGraph, directory: DirectoryNode, parent: Optional[int]) -> int:
		index = graph.add_node(directory.name, "directory")
		if parent is not None:
			graph.connect(parent, index)
		for sub in directory.directories:
			self._add_directory(graph, sub, index)
		for entry in directory.files:
			self._add_file(graph, entry, index)
		return index

	def _add_file(self, graph: MermaidGraph, entry: FileEntry, parent: int) -> int:
		index = graph.add_node(entry.name, "file")
		graph.connect(parent, index)
		annotation = self.annotate(entry)
		if annotation is None:
			return index
		if annotation.error:
			marker = graph.add_node(f"parse error: {annotation.error}", "error")
			graph.connect(index, marker, dotted=True)
		for unit in annotation.units:
			class_index = graph.add_node(unit.name, "class")
			graph.connect(index, class_index, "class")
			for method in unit.methods:
				graph.connect(class_index, graph.add_node(method, "method"), "method")
		return index
