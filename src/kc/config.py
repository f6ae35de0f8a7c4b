"""Viewer settings: defaults, optional TOML file, command-line overrides."""

import codecs
import logging
import tomllib
from pathlib import Path
from typing import Any, Self

from mm_result import Result
from pydantic import BaseModel, ConfigDict, PositiveInt, ValidationError, field_validator

from .utils import fatal

log = logging.getLogger(__name__)


def format_validation_errors(errors: list[Any]) -> str:
    """Render pydantic errors as a header plus one ``field: msg`` line each."""
    lines = ["config validation errors"]
    for e in errors:
        loc = e["loc"]
        field = ".".join(str(part) for part in loc) if loc else ""
        lines.append(f"  {field}: {e['msg']}")
    return "\n".join(lines)


class ViewerConfig(BaseModel):
    """Settings for reading and searching a file."""

    model_config = ConfigDict(extra="forbid")

    max_line_length: PositiveInt | None = None
    encoding: str = "utf-8"
    all_occurrences: bool = False

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        """Reject codec names Python does not know."""
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        return value

    @classmethod
    def load(cls, path: Path) -> Result[Self]:
        """Load and validate config from a TOML file."""
        try:
            with path.expanduser().open("rb") as f:
                data = tomllib.load(f)
            return Result.ok(cls(**data))
        except ValidationError as e:
            return Result.err(("validation_error", e), context={"errors": e.errors()})
        except Exception as e:
            return Result.err(e)

    @classmethod
    def load_or_exit(cls, path: Path | None) -> Self:
        """Load config from ``path``, or defaults when it is None. Print error and exit(1) on failure."""
        if path is None:
            return cls()
        result = cls.load(path)
        if result.is_ok():
            log.debug("loaded config from %s", path)
            return result.unwrap()
        if result.error == "validation_error" and result.context:
            fatal(format_validation_errors(result.context["errors"]))
        fatal(f"can't load config: {result.error}")

    def with_overrides(self, **values: Any) -> Self:  # noqa: ANN401 -- option values of mixed types
        """Return a validated copy with every non-None value applied."""
        updates = {key: value for key, value in values.items() if value is not None}
        if not updates:
            return self
        return self.model_validate({**self.model_dump(), **updates})
