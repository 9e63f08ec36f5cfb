"""
Bundle assembly.

Puts the mode loader records of every component in a bundle together with
the bundled module code into one Ionic.loadComponents(...) call, then hashes
that text to name the output file. Nothing is written to disk here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import DEFAULT_CONFIG, FormatterConfig
from .descriptors import Bundle
from .formatters import ModeLoaderEncoder
from .hashing import BundleHasher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BundleOutput:
    """Generated bundle text and the names derived from it."""

    module_id: str  # sorted component classes joined with '.'
    bundle_id: str  # content hash of `content`
    file_name: str
    content: str


def get_bundled_modules_id(bundle: Bundle) -> str:
    """
    Order-independent id for the set of component classes in a bundle.

    Class names are sorted and joined with '.'; duplicates are kept, so a
    bundle listing the same class twice gets 'A.A'.
    """
    return '.'.join(sorted(c.component.componentClass for c in bundle.components))


def format_bundle_content(
    bundle_id: str,
    bundled_js_modules: str,
    component_mode_loader: str,
    config: Optional[FormatterConfig] = None,
) -> str:
    """Wrap bundle id, module code and loader records in the loader call."""
    config = config or DEFAULT_CONFIG
    return '\n'.join([
        f"{config.loader_function}(\n",

        "/**** bundleId ****/",
        f"{bundle_id},\n",

        "/**** bundled modules ****/",
        f"{bundled_js_modules},\n",

        f"{component_mode_loader}",

        ")",
    ])


def build_bundle(
    bundle: Bundle,
    bundled_js_modules: str,
    config: Optional[FormatterConfig] = None,
    encoder: Optional[ModeLoaderEncoder] = None,
) -> BundleOutput:
    """
    Encode a whole bundle and name it by content hash.

    Args:
        bundle: Components and their selected modes, in load order.
        bundled_js_modules: Transpiled module code, passed through untouched.
        config: Hashing and naming policy (defaults when None).
        encoder: Mode loader encoder to use (non-strict when None).

    Returns:
        BundleOutput whose bundle_id is the hash of its content.
    """
    config = config or DEFAULT_CONFIG
    encoder = encoder or ModeLoaderEncoder()
    hasher = BundleHasher(config)

    module_id = get_bundled_modules_id(bundle)
    loaders = ',\n'.join(encoder.encode(c.component, c.mode) for c in bundle.components)

    content = format_bundle_content(f"'{module_id}'", bundled_js_modules, loaders, config)
    bundle_id = hasher.hash(content)

    logger.debug(
        "Built bundle %s (%d mode loaders, modules %s)",
        bundle_id, len(bundle.components), module_id,
    )
    return BundleOutput(
        module_id=module_id,
        bundle_id=bundle_id,
        file_name=hasher.file_name(bundle_id),
        content=content,
    )
