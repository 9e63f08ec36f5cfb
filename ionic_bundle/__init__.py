"""
Ionic Bundle - Component Loader Encoding

Turns compiled component descriptors into the text the runtime component
loader reads, and names the generated bundles by content hash.

**Encoders:**
- Mode loader records: 7-slot positional arrays, one per component mode
- Registry: compact JSON of every known component
- Bundle: Ionic.loadComponents(...) call around modules and loader records

**Identity:**
- Bundle id: truncated sha256 of the bundle text
- Module id: sorted component class names joined with '.'

Every encoder is a pure function of its arguments.

Version: 0.1.0
"""

__version__ = '0.1.0'

# ============================================================================
# Descriptors
# ============================================================================

from .descriptors import (
    Prop, ListenOpts, WatchOpts, Component, ComponentMode,
    BundleComponent, Bundle,
    component_from_dict, mode_from_dict, bundle_from_dict,
)

# ============================================================================
# Codes
# ============================================================================

from .codes import (
    MODE_CODES, PROP_TYPE_CODES, PRIORITY_CODES,
    PropType, ModeName, resolve_mode_name,
)

# ============================================================================
# Encoders
# ============================================================================

from .formatters import (
    format_boolean, format_mode_name, format_priority, format_styles,
    format_listeners, format_watchers,
    ModeLoaderEncoder, format_component_mode_loader,
)

from .registry import (
    EnumCode, RegistryEncoder,
    format_registry_content, format_component_registry_props,
)

from .bundle import (
    BundleOutput, build_bundle, format_bundle_content, get_bundled_modules_id,
)

# ============================================================================
# Hashing & Config
# ============================================================================

from .hashing import BundleHasher, generate_bundle_id, format_bundle_file_name
from .config import FormatterConfig, DEFAULT_CONFIG, load_config

# ============================================================================
# Errors
# ============================================================================

from .errors import (
    FormatterError, DescriptorError, UnknownModeError, ConfigError,
    E_DESCRIPTOR, E_UNKNOWN_MODE, E_CONFIG,
)

__all__ = [
    '__version__',

    # Descriptors
    'Prop', 'ListenOpts', 'WatchOpts', 'Component', 'ComponentMode',
    'BundleComponent', 'Bundle',
    'component_from_dict', 'mode_from_dict', 'bundle_from_dict',

    # Codes
    'MODE_CODES', 'PROP_TYPE_CODES', 'PRIORITY_CODES',
    'PropType', 'ModeName', 'resolve_mode_name',

    # Encoders
    'format_boolean', 'format_mode_name', 'format_priority', 'format_styles',
    'format_listeners', 'format_watchers',
    'ModeLoaderEncoder', 'format_component_mode_loader',
    'EnumCode', 'RegistryEncoder',
    'format_registry_content', 'format_component_registry_props',
    'BundleOutput', 'build_bundle', 'format_bundle_content', 'get_bundled_modules_id',

    # Hashing & Config
    'BundleHasher', 'generate_bundle_id', 'format_bundle_file_name',
    'FormatterConfig', 'DEFAULT_CONFIG', 'load_config',

    # Errors
    'FormatterError', 'DescriptorError', 'UnknownModeError', 'ConfigError',
    'E_DESCRIPTOR', 'E_UNKNOWN_MODE', 'E_CONFIG',
]
