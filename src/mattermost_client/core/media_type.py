"""Media type parsing and compatibility."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

WILDCARD = "*"


@dataclass(slots=True, frozen=True)
class MediaType:
    type: str = WILDCARD
    subtype: str = WILDCARD
    parameters: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, value: str | None) -> "MediaType | None":
        """Parse a ``Content-Type`` value; return None when absent or malformed."""

        if value is None:
            return None
        essence, *raw_params = value.split(";")
        essence = essence.strip()
        if essence == "":
            return None
        if "/" in essence:
            main, _, sub = essence.partition("/")
        elif essence == WILDCARD:
            main, sub = WILDCARD, WILDCARD
        else:
            return None
        main = main.strip().lower()
        sub = sub.strip().lower()
        if main == "" or sub == "":
            return None

        parameters: dict[str, str] = {}
        for raw in raw_params:
            name, sep, param_value = raw.partition("=")
            name = name.strip().lower()
            if not sep or name == "":
                continue
            parameters[name] = param_value.strip().strip('"')
        return cls(type=main, subtype=sub, parameters=parameters)

    @property
    def charset(self) -> str | None:
        return self.parameters.get("charset")

    def compatible_with(self, other: "MediaType | None") -> bool:
        """Wildcards match anything; otherwise type and subtype must agree.

        Parameters are ignored.
        """

        if other is None:
            return False
        if self.type == WILDCARD or other.type == WILDCARD:
            return True
        if self.type != other.type:
            return False
        if self.subtype == WILDCARD or other.subtype == WILDCARD:
            return True
        return self.subtype == other.subtype

    def __str__(self) -> str:
        text = f"{self.type}/{self.subtype}"
        for name, value in self.parameters.items():
            text += f";{name}={value}"
        return text


TEXT_PLAIN = MediaType("text", "plain")
APPLICATION_JSON = MediaType("application", "json")


__all__ = [
    "MediaType",
    "TEXT_PLAIN",
    "APPLICATION_JSON",
]
