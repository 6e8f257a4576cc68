"""${ENV_VAR} references inside raw, not yet validated, config data."""

import os
import re
from collections.abc import Callable
from typing import TypeAlias

_REFERENCE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def _map_strings(data: RawValue, transform: Callable[[str], str]) -> RawValue:
    """Rebuild data with transform applied to every string leaf."""
    match data:
        case str():
            return transform(data)
        case list():
            return [_map_strings(item, transform) for item in data]
        case dict():
            return {key: _map_strings(value, transform) for key, value in data.items()}
    return data


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return each referenced but unset variable once, in first-seen order."""
    missing: dict[str, None] = {}

    def record(text: str) -> str:
        for name in _REFERENCE.findall(text):
            if name not in os.environ:
                missing.setdefault(name)
        return text

    _map_strings(data, record)
    return list(missing)


def interpolate(data: RawValue) -> RawValue:
    """Substitute every ${VAR} reference with its value.

    Call `collect_missing_vars` first; an unset variable raises KeyError here.
    """
    return _map_strings(
        data,
        lambda text: _REFERENCE.sub(lambda found: os.environ[found.group(1)], text),
    )
