import pytest

from mapper.config import ExportSettings, load_settings
from mapper.errors import ConfigError
from mapper.model import OutputFormat


def test_no_path_gives_defaults():
	settings = load_settings(None)
	assert settings == ExportSettings()
	assert "bin" in settings.excluded_directories
	assert ".sln" in settings.excluded_extensions
	assert settings.include_code_details is False
	assert settings.error_markers_for(OutputFormat.TEXT) is None


def test_yaml_file_overrides_fields(tmp_path):
	p = tmp_path / "settings.yaml"
	p.write_text(
		"excluded_directories: [dist]\n"
		"excluded_extensions: ['.LOCK']\n"
		"include_code_details: true\n"
		"error_markers:\n"
		"  json: true\n"
		"  text: false\n"
	)
	settings = load_settings(str(p))
	assert settings.include_code_details is True
	assert settings.error_markers_for(OutputFormat.JSON) is True
	assert settings.error_markers_for("text") is False
	policy = settings.exclusion_policy()
	assert policy.should_skip_directory("DIST")
	assert not policy.should_skip_directory("bin")
	assert policy.should_skip_file(".lock")


def test_empty_file_gives_defaults(tmp_path):
	p = tmp_path / "empty.yaml"
	p.write_text("")
	assert load_settings(str(p)) == ExportSettings()


@pytest.mark.parametrize(
	"content",
	[
		"include_code_details: [unclosed\n",
		"- just\n- a list\n",
		"include_code_details: maybe\n",
		"error_markers:\n  pdf: true\n",
	],
)
def test_bad_settings_raise_config_error(tmp_path, content):
	p = tmp_path / "bad.yaml"
	p.write_text(content)
	with pytest.raises(ConfigError):
		load_settings(str(p))


def test_missing_settings_file(tmp_path):
	with pytest.raises(ConfigError, match="not found"):
		load_settings(str(tmp_path / "nope.yaml"))
