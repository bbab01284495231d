"""Project structure exporter: walks a directory tree and renders it as text.

Modules:
- exclusion.py: Directory-name and file-extension skip rules.
- fs_scan.py: Pre-order tree walk with a visitor interface, and tree building.
- annotate.py: Class/method extraction for source files (ast for Python, Tree-sitter for C#, Java, TypeScript, JavaScript).
- model.py: Tree entries, code units, output formats and export results.
- renderers/: One renderer per output format.
- config.py: YAML-backed export settings.
- export.py: Format dispatch and the caller-facing export result.
"""

__all__ = [
	"exclusion",
	"fs_scan",
	"annotate",
	"model",
	"renderers",
	"config",
	"export",
]
