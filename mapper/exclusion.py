from __future__ import annotations

from typing import FrozenSet, Iterable, Optional


DEFAULT_EXCLUDED_DIRECTORIES = (
	".vs",
	"bin",
	"obj",
	"packages",
	"node_modules",
	"wwwroot",
	"properties",
	".git",
	".hg",
	".svn",
	".idea",
	"__pycache__",
)

DEFAULT_EXCLUDED_EXTENSIONS = (
	".user",
	".suo",
	".csproj",
	".json",
	".sln",
)


def _fold(values: Iterable[str]) -> FrozenSet[str]:
	return frozenset(v.casefold() for v in values if v)


class ExclusionPolicy:
	"""Name-based skip rules shared by every renderer.

	Directories match on their bare name and files on their extension, both
	case-insensitively. The sets are fixed once the policy is built.
	"""

	def __init__(
		self,
		directories: Optional[Iterable[str]] = None,
		extensions: Optional[Iterable[str]] = None,
	) -> None:
		self._directories = _fold(DEFAULT_EXCLUDED_DIRECTORIES if directories is None else directories)
		self._extensions = _fold(DEFAULT_EXCLUDED_EXTENSIONS if extensions is None else extensions)

	@property
	def directories(self) -> FrozenSet[str]:
		return self._directories

	@property
	def extensions(self) -> FrozenSet[str]:
		return self._extensions

	def should_skip_directory(self, name: Optional[str]) -> bool:
		if not name:
			return False
		return name.casefold() in self._directories

	def should_skip_file(self, extension: Optional[str]) -> bool:
		if not extension:
			return False
		return extension.casefold() in self._extensions
