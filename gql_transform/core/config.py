"""Build configuration loaded from ``graphql-transform.json``.

Example:
    {
        "targets": [
            {
                "schema": ["queries/**/*.graphql"],
                "template": "templates/operations.ts.j2",
                "output": "src/generated/operations.ts",
                "header": "// {output} is generated, do not edit"
            }
        ]
    }
"""

import os

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError, field_validator

from .errors import ConfigError

DEFAULT_CONFIG_FILE = "graphql-transform.json"


class ConfigTarget(BaseModel):
    """One output file built from a set of GraphQL documents."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    # "schema" would shadow a BaseModel attribute, hence the alias
    schema_files: list[str] = Field(alias="schema", min_length=1)
    template: str
    output: str
    # Prepended to the rendered output; "{output}" expands to the file name
    header: str | None = None

    @field_validator("schema_files", mode="before")
    @classmethod
    def _wrap_single_pattern(cls, value):
        if isinstance(value, str):
            return [value]
        return value


class Config(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="forbid")

    targets: list[ConfigTarget] = Field(default_factory=list)
    # Directory relative paths resolve against; set by load_config
    _base_dir: str = PrivateAttr(default="")

    @property
    def base_dir(self) -> str:
        return self._base_dir or os.getcwd()


def load_config(path: str = DEFAULT_CONFIG_FILE) -> Config:
    """Read and validate a configuration file."""
    try:
        with open(path, encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    try:
        config = Config.model_validate_json(content)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}:\n{e}") from e

    config._base_dir = os.path.dirname(os.path.abspath(path))
    return config
