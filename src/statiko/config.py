"""Site configuration: settings schema and config.yaml loader"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "STATIKO_"


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    site_name:          str = Field(default="",                        alias="SiteName",         description="Site name (HTML fragment, inserted verbatim)")
    source_path:        str = Field(default="pages-md",                alias="SourcePath",       description="Root directory of the markdown sources")
    destination_path:   str = Field(default="html",                    alias="DestinationPath",  description="Root directory of the generated site")
    page_template_file: str = Field(default="templates/template.html", alias="PageTemplateFile", description="Jinja2 page template")
    resource_path:      str = Field(default="res",                     alias="ResourcePath",     description="Directory copied verbatim into the site")
    post_pattern:       str = Field(default=r"[0-9]{8}-.*",            alias="PostPattern",      description="Regex matched against source paths to find posts")

    @field_validator("post_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid post_pattern {value!r}: {e}") from e
        return value


def load_config() -> Settings:
    """Load Settings from config.yaml, then STATIKO_<FIELD> env vars."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name, field in Settings.model_fields.items():
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data.pop(field.alias, None)
            data[name] = val
    return Settings(**data)
