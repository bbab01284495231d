from __future__ import annotations

from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, ValidationError

from .errors import ConfigError
from .exclusion import DEFAULT_EXCLUDED_DIRECTORIES, DEFAULT_EXCLUDED_EXTENSIONS, ExclusionPolicy
from .model import OutputFormat


class ExportSettings(BaseModel):
	excluded_directories: List[str] = list(DEFAULT_EXCLUDED_DIRECTORIES)
	excluded_extensions: List[str] = list(DEFAULT_EXCLUDED_EXTENSIONS)
	include_code_details: bool = False
	sort_entries: bool = False
	# per-format override of whether parse failures are shown inline
	error_markers: Dict[OutputFormat, bool] = {}

	def exclusion_policy(self) -> ExclusionPolicy:
		return ExclusionPolicy(self.excluded_directories, self.excluded_extensions)

	def error_markers_for(self, fmt: OutputFormat) -> Optional[bool]:
		return self.error_markers.get(OutputFormat(fmt))


def load_settings(path: Optional[str] = None) -> ExportSettings:
	"""Read settings from a YAML file; no path means the built-in defaults."""
	if not path:
		return ExportSettings()
	try:
		with open(path, "r", encoding="utf-8") as f:
			data = yaml.safe_load(f)
	except FileNotFoundError as exc:
		raise ConfigError(f"Settings file not found: {path}") from exc
	except OSError as exc:
		raise ConfigError(f"Cannot read settings file {path}: {exc}") from exc
	except yaml.YAMLError as exc:
		raise ConfigError(f"Malformed settings file {path}: {exc}") from exc

	if data is None:
		return ExportSettings()
	if not isinstance(data, dict):
		raise ConfigError(f"Settings file {path} must contain a mapping")
	try:
		return ExportSettings(**data)
	except ValidationError as exc:
		raise ConfigError(f"Invalid settings in {path}: {exc}") from exc
