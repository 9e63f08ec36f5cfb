"""
Shorthand Code Tables

Small closed-set lookups shared by the encoders. The runtime loader decodes
these by number, so the values below are part of the wire format.

    mode name   default → 0, ios → 1, md → 2, wp → 3, other → quoted string
    prop type   boolean → 0, number → 1, other → no code
    priority    low → 0, anything else → 1
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import UnknownModeError


MODE_CODES = {
    'default': 0,
    'ios': 1,
    'md': 2,
    'wp': 3,
}


class PropType(str, Enum):
    BOOLEAN = 'boolean'
    NUMBER = 'number'
    STRING = 'string'
    ANY = 'any'


PROP_TYPE_CODES = {
    PropType.BOOLEAN: 0,
    PropType.NUMBER: 1,
}

PRIORITY_LOW = 'low'
PRIORITY_HIGH = 'high'

PRIORITY_CODES = {
    PRIORITY_LOW: 0,
    PRIORITY_HIGH: 1,
}


@dataclass(frozen=True)
class ModeName:
    """
    A normalized mode name, either known (has a numeric code) or unrecognized.

    Unrecognized names are still valid: the encoder writes them as quoted
    string literals. Callers that would rather reject them use
    resolve_mode_name(..., strict=True).
    """
    name: str
    code: Optional[int] = None

    @property
    def known(self) -> bool:
        return self.code is not None

    def literal(self) -> Union[int, str]:
        """Value as it appears in the encoded text"""
        if self.known:
            return self.code
        return f"'{self.name}'"


def normalize_mode_name(name: Optional[str]) -> str:
    return name.strip().lower() if name else ''


def resolve_mode_name(name: Optional[str], strict: bool = False) -> ModeName:
    """
    Resolve a mode name to its tagged form

    Args:
        name: Raw mode name (None/empty means the unnamed mode)
        strict: Raise UnknownModeError for a non-empty name without a code
            instead of falling back to a quoted literal

    Returns:
        ModeName with code set for ios/md/wp/default, None otherwise
    """
    normalized = normalize_mode_name(name)
    code = MODE_CODES.get(normalized)
    # the unnamed mode is always valid, even when strict
    if code is None and strict and normalized:
        raise UnknownModeError(f"No code for mode {normalized!r}")
    return ModeName(normalized, code)


def prop_type_code(prop_type) -> Optional[int]:
    """Code for a prop type, None for kinds without a shorthand"""
    try:
        return PROP_TYPE_CODES.get(PropType(prop_type))
    except ValueError:
        return None
