from __future__ import annotations

import json
from typing import Any, Dict

from ..model import DirectoryNode, FileEntry, OutputFormat
from .base import Renderer


class JsonRenderer(Renderer):
	"""Nested ``directory``/``file`` nodes, subdirectories before files."""

	format = OutputFormat.JSON

	def render(self, root: str) -> str:
		tree = self.build_tree(root)
		return json.dumps(self._directory_node(tree), indent=2, ensure_ascii=False)

	def _directory_node(self, directory: DirectoryNode) -> Dict[str, Any]:
		children = [self._directory_node(d) for d in directory.directories]
		children.extend(self._file_node(f) for f in directory.files)
		return {"name": directory.name, "type": "directory", "children": children}

	def _file_node(self, entry: FileEntry) -> Dict[str, Any]:
		node: Dict[str, Any] = {"name": entry.name, "type": "file"}
		annotation = self.annotate(entry)
		if annotation is not None:
			if annotation.error:
				node["error"] = annotation.error
			else:
				node["classes"] = [unit.model_dump() for unit in annotation.units]
		return node
