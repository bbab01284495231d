"""One renderer per output format, all driven by the shared tree walk."""

from typing import Dict, Type

from ..model import OutputFormat
from .base import Renderer, RenderContext, StreamingRenderer
from .html import HtmlRenderer
from .json_tree import JsonRenderer
from .markdown import MarkdownRenderer
from .mermaid import MermaidRenderer
from .outline import OutlineRenderer
from .yaml_tree import YamlRenderer

RENDERERS: Dict[OutputFormat, Type[Renderer]] = {
	OutputFormat.TEXT: OutlineRenderer,
	OutputFormat.MARKDOWN: MarkdownRenderer,
	OutputFormat.HTML: HtmlRenderer,
	OutputFormat.JSON: JsonRenderer,
	OutputFormat.YAML: YamlRenderer,
	OutputFormat.MERMAID: MermaidRenderer,
}

__all__ = [
	"RENDERERS",
	"Renderer",
	"RenderContext",
	"StreamingRenderer",
	"OutlineRenderer",
	"MarkdownRenderer",
	"HtmlRenderer",
	"JsonRenderer",
	"YamlRenderer",
	"MermaidRenderer",
]
