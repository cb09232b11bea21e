"""Configuration management for SuffixPy."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from suffixpy.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for a suffix array tool run."""

    tool: Literal["lrs", "lcs", "kwic", "spell"] = Field("lrs", description="Tool to run")
    inputs: list[str] = Field(default_factory=list, description="Input text files")
    queries: list[str] = Field(default_factory=list, description="Keywords for kwic")
    context: int = Field(Constants.DEFAULT_CONTEXT, ge=0, description="Characters of context")
    cutoff: int = Field(Constants.INSERTION_SORT_CUTOFF, ge=1, description="Insertion sort cutoff")
    top_n: int | None = Field(None, ge=1, description="Top N most common words for spell")
    include: str | None = None
    collapse_whitespace: bool = True
    output: str | None = None
    log_file: str | None = None
    verbose: bool = False
    debug: bool = False

    @field_validator("queries", mode="before")
    @classmethod
    def parse_query_list(cls, v):
        """Parse comma-separated string or array into a list of keywords."""
        if v is None or v == "":
            return []
        if isinstance(v, list):
            return [s for s in v if s]
        if isinstance(v, str):
            return [s for s in v.split(",") if s]
        return []

    @field_validator("inputs", mode="before")
    @classmethod
    def parse_input_list(cls, v):
        """Accept a single path as well as a list of paths."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if self.tool == "lcs" and len(self.inputs) != 2:
            raise ValueError(f"lcs requires exactly 2 input files, got {len(self.inputs)}")
        if self.tool != "lcs" and not self.inputs:
            raise ValueError(f"{self.tool} requires at least one input file")
        if self.tool == "kwic" and not self.queries:
            raise ValueError("kwic requires at least one query")
        if self.tool == "spell" and not self.top_n and not self.include:
            raise ValueError("spell requires --top-n or --include (or both)")
        return self


def _read_json_config(json_path: str) -> dict:
    """Read a JSON config file; invalid JSON is reported as ValueError."""
    path = expand_file_path(json_path) or json_path
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        logger.error(f"✗ Could not read config file {path}: {e}")
        raise
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"✗ Config file {path} is not valid UTF-8 JSON: {e}")
        raise ValueError(f"Invalid JSON configuration: {e}") from e


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = _read_json_config(json_path) if json_path else {}

    config_dict = {
        "tool": get_value("tool", "lrs"),
        "inputs": get_value("inputs", []),
        "queries": get_value("queries", None),
        "context": get_value("context", Constants.DEFAULT_CONTEXT),
        "cutoff": get_value("cutoff", Constants.INSERTION_SORT_CUTOFF),
        "top_n": get_value("top_n", None),
        "include": get_value("include", None),
        "collapse_whitespace": not cli_args.keep_whitespace
        and json_config.get("collapse_whitespace", True),
        "output": get_value("output", None),
        "log_file": get_value("log_file", None),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
