"""
Content-addressed bundle ids.

The id is the first hash_length hex characters of a digest of the bundle
text (sha256, 8 chars by default). Same text always gives the same id, so
the id doubles as a cache key and as the file name fragment. Truncation
means two different texts can collide; that is accepted for cache keys.

Text is hashed as UTF-8. Lone surrogates (unpaired halves of a UTF-16
pair) cannot be UTF-8 encoded and are hashed as U+FFFD, the same bytes
the JavaScript build tooling produces for them.
"""

import hashlib
from typing import Optional

from .config import DEFAULT_CONFIG, FormatterConfig


def _utf8(content: str) -> bytes:
    try:
        return content.encode('utf-8')
    except UnicodeEncodeError:
        # re-pair surrogates, replace the unpaired ones with U+FFFD
        text = content.encode('utf-16', 'surrogatepass').decode('utf-16', 'replace')
        return text.encode('utf-8')


class BundleHasher:
    """Computes bundle ids and file names under a FormatterConfig"""

    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def hash(self, content: str) -> str:
        digest = hashlib.new(self.config.hash_algorithm, _utf8(content))
        return digest.hexdigest()[:self.config.hash_length]

    def file_name(self, bundle_id: str) -> str:
        return f"{self.config.file_name_prefix}{bundle_id}{self.config.file_name_suffix}"


def generate_bundle_id(content: str, config: Optional[FormatterConfig] = None) -> str:
    """
    Content hash of a bundle's text

    Example:
        >>> len(generate_bundle_id('Ionic.loadComponents()'))
        8
    """
    return BundleHasher(config).hash(content)


def format_bundle_file_name(bundle_id: str, config: Optional[FormatterConfig] = None) -> str:
    """'abcd1234' → 'ionic.abcd1234.js'"""
    return BundleHasher(config).file_name(bundle_id)
