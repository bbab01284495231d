from __future__ import annotations

import os
from typing import List, Optional, Protocol, Tuple

from .errors import ExportError
from .exclusion import ExclusionPolicy
from .model import DirectoryNode, FileEntry


class TreeVisitor(Protocol):
	def enter_directory(self, directory: DirectoryNode, depth: int) -> None: ...

	def visit_file(self, entry: FileEntry, depth: int) -> None: ...

	def exit_directory(self, directory: DirectoryNode, depth: int) -> None: ...


def directory_name(path: str) -> str:
	name = os.path.basename(os.path.normpath(path))
	return name or path


def file_entry(path: str) -> FileEntry:
	name = os.path.basename(path)
	_, ext = os.path.splitext(name)
	return FileEntry(name=name, extension=ext, path=path)


def list_directory(path: str, sort_entries: bool = False) -> Tuple[List[str], List[str]]:
	"""Return ``(subdirectory_paths, file_paths)`` in enumeration order.

	Symlinked directories are reported as neither, so a link cycle can never
	be followed. Any ``OSError`` is fatal for the export.
	"""
	dirs: List[str] = []
	files: List[str] = []
	try:
		with os.scandir(path) as entries:
			for entry in entries:
				if entry.is_dir(follow_symlinks=False):
					dirs.append(entry.path)
				elif entry.is_file():
					files.append(entry.path)
	except OSError as exc:
		raise ExportError(f"Cannot read directory {path}: {exc.strerror or exc}") from exc
	if sort_entries:
		dirs.sort(key=lambda p: os.path.basename(p).casefold())
		files.sort(key=lambda p: os.path.basename(p).casefold())
	return dirs, files


def resolve_root(root: str) -> str:
	root = os.path.abspath(root)
	if not os.path.isdir(root):
		raise ExportError(f"Root directory does not exist or is not a directory: {root}")
	return root


def walk_tree(
	root: str,
	visitor: TreeVisitor,
	policy: Optional[ExclusionPolicy] = None,
	sort_entries: bool = False,
) -> None:
	"""Depth-first pre-order walk: a directory, its subdirectories, then its files."""
	policy = policy or ExclusionPolicy()
	root = resolve_root(root)

	def _walk(path: str, depth: int) -> None:
		node = DirectoryNode(name=directory_name(path), path=path)
		dirs, files = list_directory(path, sort_entries)
		visitor.enter_directory(node, depth)
		for sub in dirs:
			if not policy.should_skip_directory(os.path.basename(sub)):
				_walk(sub, depth + 1)
		for file_path in files:
			entry = file_entry(file_path)
			if not policy.should_skip_file(entry.extension):
				visitor.visit_file(entry, depth)
		visitor.exit_directory(node, depth)

	_walk(root, 0)


class TreeBuilder:
	"""Visitor that materializes the walk into a ``DirectoryNode`` tree."""

	def __init__(self) -> None:
		self.root: Optional[DirectoryNode] = None
		self._stack: List[DirectoryNode] = []

	def enter_directory(self, directory: DirectoryNode, depth: int) -> None:
		if self._stack:
			self._stack[-1].directories.append(directory)
		else:
			self.root = directory
		self._stack.append(directory)

	def visit_file(self, entry: FileEntry, depth: int) -> None:
		self._stack[-1].files.append(entry)

	def exit_directory(self, directory: DirectoryNode, depth: int) -> None:
		self._stack.pop()


def build_tree(
	root: str,
	policy: Optional[ExclusionPolicy] = None,
	sort_entries: bool = False,
) -> DirectoryNode:
	builder = TreeBuilder()
	walk_tree(root, builder, policy, sort_entries)
	if builder.root is None:
		raise ExportError(f"Nothing was walked under {root}")
	return builder.root
