"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (HHOUTLINE__SECTION__KEY)
3. YAML file (--config path, else ~/.config/hhoutline/config.yaml)
4. Built-in defaults (this file)

Examples:
    HHOUTLINE__LOGGING__LEVEL=DEBUG
    HHOUTLINE__OUTLINE__FORMAT=legacy
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
OutputFormat = Literal["tree", "legacy", "text"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        HHOUTLINE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG reports parse diagnostics per request.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class OutlineConfig(BaseModel):
    """Outline rendering configuration.

    Env vars:
        HHOUTLINE__OUTLINE__FORMAT: Default output shape (tree, legacy, text)
        HHOUTLINE__OUTLINE__INDENT: JSON indent width (0 for compact output)
        HHOUTLINE__OUTLINE__GRAMMAR: Tree-sitter grammar name
    """

    format: OutputFormat = Field(
        default="tree",
        description="Default output shape when --format is not given.",
    )
    indent: int = Field(
        default=2,
        description="JSON indent width. 0 emits compact single-line JSON.",
    )
    grammar: str = Field(
        default="hack",
        description="Grammar name passed to tree-sitter-language-pack.",
    )

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Indent must be >= 0, got {v}")
        return v


class HHOutlineConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    outline: OutlineConfig = Field(default_factory=OutlineConfig)
