from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

import uvicorn
from loguru import logger

from mapper.config import load_settings
from mapper.errors import ConfigError
from mapper.export import run_export
from mapper.model import OutputFormat, file_extension, file_filter


def configure_logging(verbose: bool) -> None:
	logger.remove()
	logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format="{level}: {message}")


def cmd_export(args: argparse.Namespace) -> None:
	try:
		settings = load_settings(args.config)
	except ConfigError as e:
		logger.error(str(e))
		raise SystemExit(1)
	if args.sort:
		settings.sort_entries = True
	if args.error_markers is not None:
		settings.error_markers[OutputFormat(args.format)] = args.error_markers
	logger.debug(f"Settings: {settings.model_dump()}")

	result = run_export(args.path, args.format, args.code_details or None, settings)
	if not result.ok:
		logger.error(f"Export failed: {result.message}")
		raise SystemExit(1)

	if args.output == "-":
		sys.stdout.write(result.content or "")
		return
	output = args.output or result.file_name
	with open(output, "w", encoding="utf-8") as fh:
		fh.write(result.content or "")
	logger.info(f"Structure exported to: {os.path.abspath(output)}")


def cmd_formats(args: argparse.Namespace) -> None:
	for fmt in OutputFormat:
		print(f"{fmt.value:<10}{file_extension(fmt):<7}{file_filter(fmt)}")


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def main(argv: Optional[List[str]] = None) -> None:
	parser = argparse.ArgumentParser(prog="solmap")
	parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pe = sub.add_parser("export", help="Export a directory tree in one of the output formats")
	pe.add_argument("path", help="Root directory to export")
	pe.add_argument("-f", "--format", choices=[f.value for f in OutputFormat], default=OutputFormat.TEXT.value)
	pe.add_argument("--code-details", action="store_true", help="Include classes and methods of source files")
	pe.add_argument("--config", help="YAML settings file")
	pe.add_argument("--sort", action="store_true", help="Sort entries by name instead of filesystem order")
	pe.add_argument(
		"--error-markers",
		action=argparse.BooleanOptionalAction,
		default=None,
		help="Show or hide inline markers for files that fail to parse",
	)
	pe.add_argument("-o", "--output", help="Output file ('-' for stdout); defaults to <root>-structure<ext>")
	pe.set_defaults(func=cmd_export)

	pf = sub.add_parser("formats", help="List output formats with their file extensions")
	pf.set_defaults(func=cmd_formats)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	args = parser.parse_args(argv)
	configure_logging(args.verbose)
	args.func(args)


if __name__ == "__main__":
	main()
