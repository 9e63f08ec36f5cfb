"""
Component Registry Encoding

The registry (every known component and the bundles it lives in) is written
as compact JSON for the runtime loader. Small enum-valued fields (mode codes,
prop type codes, priority) must come out as bare numbers.

Two encoders are provided:

    format_registry_content   JSON, then every quoted "0".."3" is unquoted.
                              This also hits unrelated string fields whose
                              value is exactly "0".."3" (e.g. a tag named "2").
    RegistryEncoder(typed=True)
                              Enum fields are tagged with EnumCode when the
                              registry is built, so JSON already writes them
                              as numbers and strings stay strings.

NaN and infinite floats have no JSON form and raise ValueError rather than
being written as the non-standard NaN / Infinity tokens.
"""

import json
import re
from typing import Any, Dict, List

from .codes import prop_type_code
from .descriptors import Prop

_QUOTED_CODE = re.compile(r'"([0-3])"')

_SEPARATORS = (',', ':')


class EnumCode(int):
    """An int that holds one of the small shorthand codes (mode, prop type, priority)"""

    def __repr__(self) -> str:
        return f"EnumCode({int(self)})"


def format_component_registry_props(props: Dict[str, Prop]) -> List[List[Any]]:
    """
    [[propName], [propName, code], ...] in prop order

    boolean props get code 0, number props code 1, other kinds no code.
    """
    p = []
    for prop_name, prop in props.items():
        formatted_prop: List[Any] = [prop_name]
        code = prop_type_code(prop.type)
        if code is not None:
            formatted_prop.append(EnumCode(code))
        p.append(formatted_prop)
    return p


class RegistryEncoder:
    """Encodes a registry mapping to registry text"""

    def __init__(self, typed: bool = False):
        """
        Args:
            typed: Rely on EnumCode/int values instead of unquoting "0".."3" in the text
        """
        self.typed = typed

    def encode(self, registry: Any) -> str:
        str_data = json.dumps(registry, separators=_SEPARATORS, ensure_ascii=False, allow_nan=False)
        if self.typed:
            return str_data

        # remove unnecessary double quotes
        return _QUOTED_CODE.sub(r'\1', str_data)


def format_registry_content(registry: Any) -> str:
    """
    Registry text with quoted single-digit codes unquoted

    Example:
        >>> format_registry_content({'ion-badge': ['2', 'badge']})
        '{"ion-badge":[2,"badge"]}'
    """
    return RegistryEncoder().encode(registry)
