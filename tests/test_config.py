"""Tests for VectorConfig loading and validation."""

import tempfile

import pytest
import yaml
from pydantic import ValidationError

from vector3d.config import FormatConfig, VectorConfig


class TestVectorConfig:
    def test_default_config(self) -> None:
        config = VectorConfig()
        assert config.format.separator == ", "
        assert config.format.accept_commas is True
        assert not config.debug

    def test_from_yaml_none_returns_default(self) -> None:
        config = VectorConfig.from_yaml(None)
        assert config.format.separator == ", "

    def test_from_yaml_missing_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            VectorConfig.from_yaml("/nonexistent/config.yaml")

    def test_from_yaml_valid_file(self) -> None:
        data = {
            "format": {"separator": " "},
            "debug": True,
        }
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(data, f)
            f.flush()

            config = VectorConfig.from_yaml(f.name)
            assert config.format.separator == " "
            assert config.debug is True
            # Unspecified fields should use defaults
            assert config.format.accept_commas is True

    def test_from_yaml_empty_file(self) -> None:
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()

            config = VectorConfig.from_yaml(f.name)
            assert config.format.separator == ", "

    def test_from_yaml_invalid_types(self) -> None:
        data = {"format": {"accept_commas": "not_a_bool"}}
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(data, f)
            f.flush()

            with pytest.raises(ValidationError):
                VectorConfig.from_yaml(f.name)


class TestFormatConfig:
    def test_defaults(self) -> None:
        fmt = FormatConfig()
        assert fmt.separator == ", "
        assert fmt.accept_commas is True

    def test_whitespace_only(self) -> None:
        fmt = FormatConfig(accept_commas=False)
        assert fmt.accept_commas is False
        assert fmt.separator == ", "  # unchanged

    def test_invalid_separator_type_raises(self) -> None:
        with pytest.raises(ValidationError):
            FormatConfig(separator=3)  # type: ignore[arg-type]
