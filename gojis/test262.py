"""Read the metadata header of Test262 test files.

A Test262 test may describe extra requirements in a YAML document enclosed
between the token sequences ``/*---`` and ``---*/``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import IO, Any, Union

import yaml

MAGIC_HEADER = "/*---"
MAGIC_FOOTER = "---*/"


class Phase(enum.IntEnum):
    """The phase in which a negative test is expected to produce its error."""

    UNKNOWN = 0
    PARSE = 1
    EARLY = 2
    RESOLUTION = 3
    RUNTIME = 4


class Flag(enum.IntFlag):
    """Flags that describe the execution environment of a test."""

    UNKNOWN = 1 << 0
    ONLY_STRICT = 1 << 1
    NO_STRICT = 1 << 2
    MODULE = 1 << 3
    RAW = 1 << 4
    ASYNC = 1 << 5
    GENERATED = 1 << 6
    CAN_BLOCK_IS_FALSE = 1 << 7
    CAN_BLOCK_IS_TRUE = 1 << 8

    def is_set(self, flag: "Flag") -> bool:
        """Return whether every flag set in ``flag`` is also set here."""
        return self & flag == flag


@dataclass
class Negative:
    """When and what error a negative test is expected to throw."""

    phase: Phase = Phase.UNKNOWN
    type: str = ""


@dataclass
class Requirements:
    """The information held in the metadata header of a test."""

    negative: Negative = field(default_factory=Negative)
    includes: list = field(default_factory=list)
    flags: Flag = Flag(0)
    locale: list = field(default_factory=list)


class NoTest262MetadataError(ValueError):
    """Raised when a file holds no Test262 metadata header."""

    def __init__(self) -> None:
        super().__init__("File does not contain a Test262-Metadata header")


_PHASES = {
    "parse": Phase.PARSE,
    "early": Phase.EARLY,
    "resolution": Phase.RESOLUTION,
    "runtime": Phase.RUNTIME,
}

_FLAGS = {
    "onlyStrict": Flag.ONLY_STRICT,
    "noStrict": Flag.NO_STRICT,
    "module": Flag.MODULE,
    "raw": Flag.RAW,
    "async": Flag.ASYNC,
    "generated": Flag.GENERATED,
    "CanBlockIsFalse": Flag.CAN_BLOCK_IS_FALSE,
    "CanBlockIsTrue": Flag.CAN_BLOCK_IS_TRUE,
}


def to_phase(phase: str) -> Phase:
    """Map a phase name to a Phase; unknown names give Phase.UNKNOWN."""
    return _PHASES.get(phase, Phase.UNKNOWN)


def to_flag(flag: str) -> Flag:
    """Map a flag name to a Flag; unknown names give Flag.UNKNOWN."""
    return _FLAGS.get(flag, Flag.UNKNOWN)


def _metadata_text(content: str) -> str:
    if MAGIC_HEADER not in content or MAGIC_FOOTER not in content:
        raise NoTest262MetadataError()
    start = content.index(MAGIC_HEADER) + len(MAGIC_HEADER)
    end = content.index(MAGIC_FOOTER)
    if end < start:
        raise NoTest262MetadataError()
    return content[start:end]


def _string(value: Any, what: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ValueError(f"unmarshal yaml: '{what}' must be a scalar")
    return str(value)


def _string_list(value: Any, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"unmarshal yaml: '{what}' must be a sequence")
    return [_string(item, what) for item in value]


def parse_header(stream: IO[Union[str, bytes]]) -> Requirements:
    """Read ``stream`` to its end and return the requirements in its header.

    Raises NoTest262MetadataError if there is no header, and ValueError if
    the header is not a valid YAML mapping.
    """
    content = stream.read()
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")

    try:
        meta = yaml.safe_load(_metadata_text(content))
    except yaml.YAMLError as exc:
        raise ValueError(f"parse metadata: unmarshal yaml: {exc}") from exc
    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise ValueError("parse metadata: unmarshal yaml: header is not a mapping")

    negative = meta.get("negative") or {}
    if not isinstance(negative, dict):
        raise ValueError("parse metadata: unmarshal yaml: 'negative' must be a mapping")

    flags = Flag(0)
    for name in _string_list(meta.get("flags"), "flags"):
        flags |= to_flag(name)

    return Requirements(
        negative=Negative(
            phase=to_phase(_string(negative.get("phase"), "phase")),
            type=_string(negative.get("type"), "type"),
        ),
        includes=_string_list(meta.get("includes"), "includes"),
        flags=flags,
        locale=_string_list(meta.get("locale"), "locale"),
    )