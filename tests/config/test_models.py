"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from hhoutline.config.models import HHOutlineConfig, LogOutputConfig, OutlineConfig


class TestLogOutputConfig:
    def test_console_destinations_accepted(self) -> None:
        assert LogOutputConfig(destination="stdout").destination == "stdout"
        assert LogOutputConfig(destination="stderr").destination == "stderr"

    def test_relative_file_destination_rejected(self) -> None:
        with pytest.raises(ValidationError, match="absolute"):
            LogOutputConfig(destination="logs/outline.log")


class TestOutlineConfig:
    def test_defaults(self) -> None:
        config = OutlineConfig()
        assert (config.format, config.indent, config.grammar) == ("tree", 2, "hack")

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OutlineConfig(format="xml")  # type: ignore[arg-type]

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Indent"):
            OutlineConfig(indent=-1)


def test_root_config_has_all_sections() -> None:
    config = HHOutlineConfig()
    assert config.logging.level == "WARNING"
    assert config.outline.format == "tree"
