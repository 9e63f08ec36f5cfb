"""
Component Descriptors

Read-only value objects produced by the compiler front end and consumed by
the encoders. Listener and watcher mappings are plain dicts: their insertion
order is the positional index the runtime loader dispatches on.

The *_from_dict loaders build descriptors from the JSON shape the compiler
writes (camelCase keys), which is what the command-line tool reads.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .codes import PropType
from .errors import DescriptorError


@dataclass(frozen=True)
class Prop:
    """One component attribute and its primitive kind"""
    type: str = PropType.ANY.value


@dataclass(frozen=True)
class ListenOpts:
    """Event binding for one handler method"""
    eventName: str
    capture: bool = False
    passive: bool = False
    enabled: bool = True


@dataclass(frozen=True)
class WatchOpts:
    """Method to invoke when the watched property changes"""
    fn: str


@dataclass(frozen=True)
class Component:
    tag: str
    componentClass: str
    shadow: bool = False
    listeners: Dict[str, ListenOpts] = field(default_factory=dict)
    watchers: Dict[str, WatchOpts] = field(default_factory=dict)
    props: Dict[str, Prop] = field(default_factory=dict)


@dataclass(frozen=True)
class ComponentMode:
    """Named visual variant of a component; name None/'' is the unnamed mode"""
    name: Optional[str] = None
    styles: Optional[str] = None


@dataclass(frozen=True)
class BundleComponent:
    component: Component
    mode: Optional[ComponentMode] = None


@dataclass(frozen=True)
class Bundle:
    """Components (with their selected mode) loaded together"""
    components: List[BundleComponent] = field(default_factory=list)


# ============================================================================
# JSON loaders
# ============================================================================

def _require(data: Dict[str, Any], key: str, what: str) -> Any:
    if not isinstance(data, dict):
        raise DescriptorError(f"{what} must be an object, got {type(data).__name__}")
    if key not in data:
        raise DescriptorError(f"{what} is missing '{key}'")
    return data[key]


def _entry(opts: Any, what: str) -> Dict[str, Any]:
    if not isinstance(opts, dict):
        raise DescriptorError(f"{what} must be an object, got {type(opts).__name__}")
    return opts


def component_from_dict(data: Dict[str, Any]) -> Component:
    """
    Build a Component from its JSON form

    Raises:
        DescriptorError: If 'tag' or 'componentClass' is missing, or a
            listener, watcher or prop entry is not an object
    """
    tag = _require(data, 'tag', 'component')
    component_class = _require(data, 'componentClass', f"component '{tag}'")

    listeners = {}
    for method, opts in _entry(data.get('listeners') or {}, "'listeners'").items():
        opts = _entry(opts, f"listener '{method}'")
        listeners[method] = ListenOpts(
            eventName=opts.get('eventName', ''),
            capture=bool(opts.get('capture', False)),
            passive=bool(opts.get('passive', False)),
            enabled=bool(opts.get('enabled', True)),
        )

    watchers = {
        prop_name: WatchOpts(fn=_require(opts, 'fn', f"watcher '{prop_name}'"))
        for prop_name, opts in _entry(data.get('watchers') or {}, "'watchers'").items()
    }

    props = {
        prop_name: Prop(type=_entry(opts, f"prop '{prop_name}'").get('type', PropType.ANY.value))
        for prop_name, opts in _entry(data.get('props') or {}, "'props'").items()
    }

    return Component(
        tag=tag,
        componentClass=component_class,
        shadow=bool(data.get('shadow', False)),
        listeners=listeners,
        watchers=watchers,
        props=props,
    )


def mode_from_dict(data: Optional[Dict[str, Any]]) -> Optional[ComponentMode]:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise DescriptorError(f"mode must be an object, got {type(data).__name__}")
    return ComponentMode(name=data.get('name'), styles=data.get('styles'))


def bundle_from_dict(data: Dict[str, Any]) -> Bundle:
    """Build a Bundle from {"components": [{"component": {...}, "mode": {...}}, ...]}"""
    entries = _require(data, 'components', 'bundle')
    if not isinstance(entries, list):
        raise DescriptorError("bundle 'components' must be a list")

    return Bundle(components=[
        BundleComponent(
            component=component_from_dict(_require(entry, 'component', 'bundle entry')),
            mode=mode_from_dict(entry.get('mode')),
        )
        for entry in entries
    ])
