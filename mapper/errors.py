from __future__ import annotations

from typing import Optional


class MapperError(Exception):
	"""Base class for all errors raised by the mapper package."""


class ExportError(MapperError):
	"""Fatal failure that aborts a whole export (missing root, unreadable directory)."""


class ParseError(MapperError):
	"""A single source file could not be annotated. Never aborts an export."""

	def __init__(self, message: str, path: Optional[str] = None) -> None:
		super().__init__(message)
		self.path = path


class ConfigError(MapperError):
	"""Settings file is missing, malformed, or holds invalid values."""
