from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel


class OutputFormat(str, Enum):
	TEXT = "text"
	MARKDOWN = "markdown"
	HTML = "html"
	JSON = "json"
	YAML = "yaml"
	MERMAID = "mermaid"


FORMAT_EXTENSIONS: Dict[OutputFormat, str] = {
	OutputFormat.TEXT: ".txt",
	OutputFormat.MARKDOWN: ".md",
	OutputFormat.HTML: ".html",
	OutputFormat.JSON: ".json",
	OutputFormat.YAML: ".yaml",
	OutputFormat.MERMAID: ".mmd",
}

FORMAT_FILTERS: Dict[OutputFormat, str] = {
	OutputFormat.TEXT: "Text files (*.txt)|*.txt|All files (*.*)|*.*",
	OutputFormat.MARKDOWN: "Markdown files (*.md)|*.md|All files (*.*)|*.*",
	OutputFormat.HTML: "HTML files (*.html)|*.html|All files (*.*)|*.*",
	OutputFormat.JSON: "JSON files (*.json)|*.json|All files (*.*)|*.*",
	OutputFormat.YAML: "YAML files (*.yaml)|*.yaml|All files (*.*)|*.*",
	OutputFormat.MERMAID: "Mermaid files (*.mmd)|*.mmd|All files (*.*)|*.*",
}


def file_extension(fmt: OutputFormat) -> str:
	return FORMAT_EXTENSIONS[OutputFormat(fmt)]


def file_filter(fmt: OutputFormat) -> str:
	return FORMAT_FILTERS[OutputFormat(fmt)]


class FileEntry(BaseModel):
	name: str
	extension: str
	path: str


class DirectoryNode(BaseModel):
	name: str
	path: str
	directories: List[DirectoryNode] = []
	files: List[FileEntry] = []


class CodeUnit(BaseModel):
	name: str
	methods: List[str] = []


class Annotation(BaseModel):
	units: List[CodeUnit] = []
	error: Optional[str] = None


class FormatInfo(BaseModel):
	format: OutputFormat
	extension: str
	filter: str


class ExportResult(BaseModel):
	ok: bool
	format: OutputFormat
	extension: str
	file_name: Optional[str] = None
	content: Optional[str] = None
	message: Optional[str] = None


DirectoryNode.model_rebuild()
