"""Tests for configuration loading."""

from pathlib import Path

import pytest

from methodsep import InvalidConfigError, SeparatorConfig, SeparatorStyle, load_config
from methodsep.config import DEFAULT_EXTENSIONS, config_from_dict


class TestLoadConfig:
    """YAML file loading."""

    def test_defaults_without_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """No path and no methodsep.yaml gives the defaults."""
        monkeypatch.chdir(tmp_path)

        assert load_config() == SeparatorConfig()

    def test_default_file_in_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """methodsep.yaml in the working directory is picked up."""
        (tmp_path / "methodsep.yaml").write_text("encoding: latin-1\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert load_config().encoding == "latin-1"

    def test_full_file(self, tmp_path: Path) -> None:
        """Every section is read."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "extensions: [cpp, .H]\n"
            "encoding: utf-8\n"
            "annotate:\n"
            "  comment_prefix: '//'\n"
            "  rule_char: '='\n"
            "  rule_width: 100\n"
            "style:\n"
            "  color: SteelBlue\n"
            "  thickness: 1\n"
            "  offset: 3\n",
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.extensions == (".cpp", ".h")
        assert config.rule_char == "="
        assert config.rule_width == 100
        assert config.style == SeparatorStyle(color="SteelBlue", thickness=1.0, offset=3.0)

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file gives the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == SeparatorConfig()

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        """An explicit path that does not exist is an error."""
        with pytest.raises(InvalidConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Unparsable YAML is an error naming the file."""
        path = tmp_path / "config.yaml"
        path.write_text("extensions: [.cpp\n", encoding="utf-8")

        with pytest.raises(InvalidConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.path == path

    def test_validation_error_carries_path(self, tmp_path: Path) -> None:
        """Validation errors from a file name that file."""
        path = tmp_path / "config.yaml"
        path.write_text("colour: red\n", encoding="utf-8")

        with pytest.raises(InvalidConfigError, match="Unknown keys") as exc_info:
            load_config(path)

        assert exc_info.value.path == path


class TestConfigFromDict:
    """Validation of parsed data."""

    def test_defaults(self) -> None:
        """An empty mapping gives the defaults."""
        config = config_from_dict({})

        assert config.extensions == DEFAULT_EXTENSIONS
        assert config.style == SeparatorStyle()

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"extensions": ".cpp"},
            {"encoding": 8},
            {"annotate": {"rule_char": "=="}},
            {"annotate": {"rule_width": 0}},
            {"annotate": {"rule_width": True}},
            {"annotate": {"comment_prefix": ""}},
            {"annotate": {"width": 80}},
            {"style": {"thickness": -1}},
            {"style": {"offset": "2"}},
            {"style": {"color": 3}},
            {"style": "red"},
            {"annotate": []},
            {"style": 0},
            {"encoding": "no-such-codec"},
            False,
        ],
    )
    def test_invalid(self, data: object) -> None:
        """Wrong types and unknown keys are rejected."""
        with pytest.raises(InvalidConfigError):
            config_from_dict(data)

    def test_unknown_encoding(self) -> None:
        """An encoding Python cannot look up is rejected."""
        with pytest.raises(InvalidConfigError, match="Unknown encoding"):
            config_from_dict({"encoding": "no-such-codec"})

    def test_encoding_alias_accepted(self) -> None:
        """Codec aliases are accepted as written."""
        assert config_from_dict({"encoding": "latin1"}).encoding == "latin1"

    def test_falsy_top_level_file(self, tmp_path: Path) -> None:
        """A file holding a scalar instead of a mapping is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("false\n", encoding="utf-8")

        with pytest.raises(InvalidConfigError, match="must be a mapping"):
            load_config(path)

    def test_null_sections_use_defaults(self) -> None:
        """Empty YAML sections fall back to the defaults."""
        config = config_from_dict({"annotate": None, "style": None})

        assert config == SeparatorConfig()
