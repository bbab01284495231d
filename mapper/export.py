from __future__ import annotations

from typing import Optional

from .annotate import AnnotatorRegistry
from .config import ExportSettings
from .errors import ExportError
from .fs_scan import directory_name, resolve_root
from .model import ExportResult, OutputFormat, file_extension
from .renderers import RENDERERS, Renderer


def suggested_file_name(root: str, fmt: OutputFormat) -> str:
	return f"{directory_name(resolve_root(root))}-structure{file_extension(fmt)}"


def create_renderer(
	fmt: OutputFormat,
	include_code_details: Optional[bool] = None,
	settings: Optional[ExportSettings] = None,
	annotators: Optional[AnnotatorRegistry] = None,
) -> Renderer:
	settings = settings or ExportSettings()
	fmt = OutputFormat(fmt)
	if include_code_details is None:
		include_code_details = settings.include_code_details
	return RENDERERS[fmt](
		include_code_details=include_code_details,
		policy=settings.exclusion_policy(),
		annotators=annotators,
		error_markers=settings.error_markers_for(fmt),
		sort_entries=settings.sort_entries,
	)


def generate_structure(
	root: str,
	fmt: OutputFormat,
	include_code_details: Optional[bool] = None,
	settings: Optional[ExportSettings] = None,
	annotators: Optional[AnnotatorRegistry] = None,
) -> str:
	"""Render the tree under ``root`` as one complete document.

	Raises ``ExportError`` when the root or any directory below it cannot be read.
	"""
	renderer = create_renderer(fmt, include_code_details, settings, annotators)
	return renderer.render(root)


def run_export(
	root: str,
	fmt: OutputFormat,
	include_code_details: Optional[bool] = None,
	settings: Optional[ExportSettings] = None,
	annotators: Optional[AnnotatorRegistry] = None,
) -> ExportResult:
	fmt = OutputFormat(fmt)
	try:
		content = generate_structure(root, fmt, include_code_details, settings, annotators)
		file_name = suggested_file_name(root, fmt)
	except ExportError as exc:
		return ExportResult(ok=False, format=fmt, extension=file_extension(fmt), message=str(exc))
	return ExportResult(
		ok=True,
		format=fmt,
		extension=file_extension(fmt),
		file_name=file_name,
		content=content,
	)
