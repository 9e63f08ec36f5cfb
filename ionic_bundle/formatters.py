"""
Component Mode Loader Formatters

Encodes component descriptors into the positional text records read by the
runtime loader (Ionic.loadComponents). The loader reads every record by
index, never by name, so slot order is fixed:

    [0] tagName
    [1] component class name
    [2] listeners   [[methodName, eventName, capture, passive, enabled], ...]
    [3] watchers    [[methodName, fn], ...]
    [4] shadow      0 | 1
    [5] modeName    0-3 | 'quoted name'
    [6] styles      0 | 'line\\n' + 'line\\n' ...

Comments embedded in the output (/* ... */) are for people reading the
generated bundle; the loader ignores them.
"""

from typing import Dict, Optional, Union

from .codes import PRIORITY_CODES, PRIORITY_HIGH, resolve_mode_name
from .descriptors import Component, ComponentMode, ListenOpts, WatchOpts


# ============================================================================
# Primitive encoders
# ============================================================================

def format_boolean(val: bool) -> str:
    return '1 /* true **/' if val else '0 /* false */'


def format_mode_name(mode_name: Optional[str], strict: bool = False) -> Union[int, str]:
    """
    Numeric code for a known mode, quoted literal for anything else

    Args:
        mode_name: Mode name ('' or None for the unnamed mode)
        strict: Raise UnknownModeError instead of quoting unknown non-empty names

    Example:
        >>> format_mode_name('ios')
        1
        >>> format_mode_name('unknown-theme')
        "'unknown-theme'"
    """
    return resolve_mode_name(mode_name, strict).literal()


def format_priority(priority: str) -> str:
    """'low' → '0', everything else is treated as high → '1'"""
    return str(PRIORITY_CODES.get(priority, PRIORITY_CODES[PRIORITY_HIGH]))


def format_styles(styles: Optional[str]) -> str:
    """
    Turn style text into a concatenated string-literal expression

    Each line becomes '<line>\\n' and lines are joined with ' + '. Single
    quotes inside the styles are swapped for double quotes so every line
    stays a valid single-quoted literal; the swap is not reversed.
    """
    if not styles:
        return '0 /* no styles */'

    lines = [
        "'" + line.replace("'", '"') + "\\n'"
        for line in styles.replace('\r\n', '\n').split('\n')
    ]
    return ' + \n'.join(lines)


# ============================================================================
# Listener / watcher arrays
# ============================================================================

def format_listener_opts(label: str, method_name: str, listener_index: int,
                         listener_opts: ListenOpts) -> str:
    t = [
        f"    /********* {label} listener[{listener_index}] {method_name} *********/\n"
        f"    /* [0] methodName **/ '{method_name}'",
        f"    /* [1] eventName ***/ '{listener_opts.eventName}'",
        f"    /* [2] capture *****/ {format_boolean(listener_opts.capture)}",
        f"    /* [3] passive *****/ {format_boolean(listener_opts.passive)}",
        f"    /* [4] enabled *****/ {format_boolean(listener_opts.enabled)}",
    ]
    return '  [\n' + ',\n'.join(t) + '\n  ]'


def format_watcher_opts(label: str, method_name: str, watch_index: int,
                        watch_opts: WatchOpts) -> str:
    t = [
        f"    /********* {label} watch[{watch_index}] {method_name} *********/\n"
        f"    /* [0] methodName **/ '{method_name}'",
        f"    /* [1] fn **********/ '{watch_opts.fn}'",
    ]
    return '  [\n' + ',\n'.join(t) + '\n  ]'


def format_listeners(label: str, listeners: Dict[str, ListenOpts]) -> str:
    """Array of listener tuples in mapping insertion order, '[]' when empty"""
    if not listeners:
        return '[]'

    t = [
        format_listener_opts(label, method_name, index, opts)
        for index, (method_name, opts) in enumerate(listeners.items())
    ]
    return '[\n' + ',\n'.join(t) + '\n]'


def format_watchers(label: str, watchers: Dict[str, WatchOpts]) -> str:
    """Array of watcher tuples in mapping insertion order, '[]' when empty"""
    if not watchers:
        return '[]'

    t = [
        format_watcher_opts(label, method_name, index, opts)
        for index, (method_name, opts) in enumerate(watchers.items())
    ]
    return '[\n' + ',\n'.join(t) + '\n]'


# ============================================================================
# Mode loader record
# ============================================================================

class ModeLoaderEncoder:
    """Encodes one component + mode pair into a 7-slot loader record"""

    def __init__(self, strict_modes: bool = False):
        """
        Args:
            strict_modes: Raise UnknownModeError for non-empty mode names
                without a numeric code instead of writing them as quoted strings
        """
        self.strict_modes = strict_modes

    def encode(self, component: Component, mode: Optional[ComponentMode] = None) -> str:
        mode = mode or ComponentMode()

        tag = component.tag.strip().lower()
        mode_name = resolve_mode_name(mode.name, self.strict_modes)

        label = tag
        if mode_name.name:
            label += '.' + mode_name.name

        mode_code = f"/* {mode_name.name} */ {mode_name.literal()}"

        t = [
            f"/** {label}: [0] tagName **/\n'{tag}'",
            f"/** {label}: [1] component class name **/\n'{component.componentClass}'",
            f"/** {label}: [2] listeners **/\n{format_listeners(label, component.listeners)}",
            f"/** {label}: [3] watchers **/\n{format_watchers(label, component.watchers)}",
            f"/** {label}: [4] shadow **/\n{format_boolean(component.shadow)}",
            f"/** {label}: [5] modeName **/\n{mode_code}",
            f"/** {label}: [6] styles **/\n{format_styles(mode.styles)}",
        ]

        return f"\n/***************** {label} *****************/\n[\n" + ',\n\n'.join(t) + '\n\n]'


def format_component_mode_loader(component: Component, mode: Optional[ComponentMode] = None,
                                 strict_modes: bool = False) -> str:
    """
    Encode a component mode loader record

    Example:
        >>> c = Component(tag='my-button', componentClass='MyButton')
        >>> "'my-button'" in format_component_mode_loader(c, ComponentMode('ios'))
        True
    """
    return ModeLoaderEncoder(strict_modes).encode(component, mode)
