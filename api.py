from __future__ import annotations

from typing import List, Optional
from urllib.parse import quote

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from loguru import logger
from pydantic import BaseModel

from mapper.export import run_export
from mapper.model import ExportResult, FormatInfo, OutputFormat, file_extension, file_filter


app = FastAPI(title="Project Structure Exporter")

MEDIA_TYPES = {
	OutputFormat.TEXT: "text/plain",
	OutputFormat.MARKDOWN: "text/markdown",
	OutputFormat.HTML: "text/html",
	OutputFormat.JSON: "application/json",
	OutputFormat.YAML: "application/yaml",
	OutputFormat.MERMAID: "text/plain",
}


class ExportRequest(BaseModel):
	root_path: str
	format: OutputFormat = OutputFormat.TEXT
	include_code_details: Optional[bool] = None


def _export(req: ExportRequest) -> ExportResult:
	result = run_export(req.root_path, req.format, req.include_code_details)
	if not result.ok:
		logger.error(f"Export of {req.root_path} failed: {result.message}")
		raise HTTPException(status_code=400, detail=result.message)
	logger.info(f"Exported {req.root_path} as {req.format.value}")
	return result


@app.get("/formats", response_model=List[FormatInfo])
def formats() -> List[FormatInfo]:
	return [FormatInfo(format=f, extension=file_extension(f), filter=file_filter(f)) for f in OutputFormat]


@app.post("/export", response_model=ExportResult)
def export(req: ExportRequest) -> ExportResult:
	return _export(req)


@app.post("/export/raw", response_class=PlainTextResponse)
def export_raw(req: ExportRequest) -> PlainTextResponse:
	result = _export(req)
	return PlainTextResponse(
		result.content or "",
		media_type=MEDIA_TYPES[req.format],
		headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(result.file_name or '')}"},
	)


def create_app() -> FastAPI:
	return app
