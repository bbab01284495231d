from __future__ import annotations

import ast
from functools import lru_cache
from typing import Dict, List, Optional, Protocol

from tree_sitter_language_pack import get_parser

from .errors import ParseError
from .model import CodeUnit, FileEntry


class CodeAnnotator(Protocol):
	"""Extracts declared type names, each with its method names, from source text.

	Implementations return units in declaration order and raise ``ParseError``
	when the text cannot be understood.
	"""

	def parse(self, text: str) -> List[CodeUnit]: ...


class PythonAnnotator:
	"""Top-level classes and their methods, read with the stdlib ``ast`` module."""

	def parse(self, text: str) -> List[CodeUnit]:
		try:
			tree = ast.parse(text)
		except (SyntaxError, ValueError) as exc:
			raise ParseError(f"invalid Python source: {exc}") from exc

		units: List[CodeUnit] = []
		for node in tree.body:
			if isinstance(node, ast.ClassDef):
				methods = [
					sub.name
					for sub in node.body
					if isinstance(sub, (ast.FunctionDef, ast.AsyncFunctionDef))
				]
				units.append(CodeUnit(name=node.name, methods=methods))
		return units


TYPE_NODE_TYPES = frozenset({
	"class_declaration",
	"abstract_class_declaration",
	"struct_declaration",
	"interface_declaration",
	"enum_declaration",
	"record_declaration",
	"record_struct_declaration",
})
MEMBER_NODE_TYPES = frozenset({
	"method_declaration",
	"constructor_declaration",
	"compact_constructor_declaration",
	"method_definition",
	"method_signature",
	"abstract_method_signature",
})
# containers whose direct children are the members of the enclosing type
BODY_NODE_TYPES = frozenset({
	"class_body",
	"declaration_list",
	"interface_body",
	"enum_body",
	"enum_body_declarations",
	"object_type",
})


@lru_cache(maxsize=16)
def load_parser(language: str):
	"""Tree-sitter parser for ``language`` from ``tree_sitter_language_pack``."""
	return get_parser(language)


def _node_name(node) -> Optional[str]:
	name = node.child_by_field_name("name")
	if name is None:
		return None
	return name.text.decode("utf-8", errors="replace")


def _first_error(node):
	if node.type == "ERROR" or node.is_missing:
		return node
	for child in node.children:
		if child.has_error or child.is_missing:
			found = _first_error(child)
			if found is not None:
				return found
	return None


class TreeSitterAnnotator:
	"""Types and their member methods for C#, Java, TypeScript and JavaScript.

	Only methods that sit directly in a type body are attributed to that type.
	Nested types become units of their own, in source order.
	"""

	def __init__(self, language: str) -> None:
		self.language = language

	def parse(self, text: str) -> List[CodeUnit]:
		try:
			parser = load_parser(self.language)
		except LookupError as exc:
			raise ParseError(f"no Tree-sitter grammar for {self.language}: {exc}") from exc
		tree = parser.parse(text.encode("utf-8"))
		if tree.root_node.has_error:
			error = _first_error(tree.root_node) or tree.root_node
			raise ParseError(f"{self.language} syntax error at line {error.start_point[0] + 1}")

		units: List[CodeUnit] = []

		def walk(node, owner: Optional[CodeUnit]) -> None:
			for child in node.named_children:
				if child.type in TYPE_NODE_TYPES:
					name = _node_name(child)
					unit = None
					if name:
						unit = CodeUnit(name=name)
						units.append(unit)
					walk(child, unit)
				elif owner is not None and child.type in BODY_NODE_TYPES:
					walk(child, owner)
				elif owner is not None and child.type in MEMBER_NODE_TYPES:
					name = _node_name(child)
					if name:
						owner.methods.append(name)
					walk(child, None)
				else:
					walk(child, None)

		walk(tree.root_node, None)
		return units


DEFAULT_ANNOTATORS: Dict[str, CodeAnnotator] = {
	".py": PythonAnnotator(),
	".cs": TreeSitterAnnotator("csharp"),
	".java": TreeSitterAnnotator("java"),
	".ts": TreeSitterAnnotator("typescript"),
	".js": TreeSitterAnnotator("javascript"),
}


class AnnotatorRegistry:
	"""Maps file extensions (case-insensitive) to the annotator that reads them."""

	def __init__(self, annotators: Optional[Dict[str, CodeAnnotator]] = None) -> None:
		source = DEFAULT_ANNOTATORS if annotators is None else annotators
		self._annotators: Dict[str, CodeAnnotator] = {ext.lower(): a for ext, a in source.items()}

	def register(self, extension: str, annotator: CodeAnnotator) -> None:
		self._annotators[extension.lower()] = annotator

	def for_extension(self, extension: str) -> Optional[CodeAnnotator]:
		if not extension:
			return None
		return self._annotators.get(extension.lower())

	def is_source(self, extension: str) -> bool:
		return self.for_extension(extension) is not None

	def annotate_file(self, entry: FileEntry) -> List[CodeUnit]:
		annotator = self.for_extension(entry.extension)
		if annotator is None:
			return []
		try:
			with open(entry.path, "r", encoding="utf-8-sig") as fh:
				text = fh.read()
		except (OSError, UnicodeDecodeError) as exc:
			raise ParseError(f"cannot read {entry.name}: {exc}", path=entry.path) from exc
		try:
			return annotator.parse(text)
		except ParseError as exc:
			if exc.path is None:
				exc.path = entry.path
			raise
