"""
ionic-bundle command-line tool.

    ionic-bundle bundle components.json --modules modules.js [--content]
    ionic-bundle hash ionic.js
    ionic-bundle registry registry.json [--typed]

Output goes to stdout; errors go to stderr with exit status 1.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .bundle import build_bundle
from .config import load_config
from .descriptors import bundle_from_dict
from .errors import FormatterError
from .formatters import ModeLoaderEncoder
from .hashing import BundleHasher
from .registry import RegistryEncoder

logger = logging.getLogger(__name__)


def _read_text(path):
    return Path(path).read_text(encoding="utf-8")


def _read_json(path):
    return json.loads(_read_text(path))


def cmd_bundle(args):
    config = load_config(args.config)
    bundle = bundle_from_dict(_read_json(args.descriptor))
    modules = _read_text(args.modules) if args.modules else ""

    output = build_bundle(
        bundle, modules, config=config,
        encoder=ModeLoaderEncoder(strict_modes=args.strict_modes),
    )
    logger.info("Bundle %s -> %s", output.module_id, output.file_name)

    if args.content:
        print(output.content)
    else:
        print(json.dumps({
            "module_id": output.module_id,
            "bundle_id": output.bundle_id,
            "file_name": output.file_name,
        }, indent=4))


def cmd_hash(args):
    hasher = BundleHasher(load_config(args.config))
    print(hasher.hash(_read_text(args.file)))


def cmd_registry(args):
    print(RegistryEncoder(typed=args.typed).encode(_read_json(args.file)))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ionic-bundle",
        description="Encode component descriptors into loader bundles.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--config", type=str, default=None, help="YAML formatter config.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_bundle = sub.add_parser("bundle", help="Encode a bundle descriptor.")
    p_bundle.add_argument("descriptor", type=str, help="JSON bundle descriptor.")
    p_bundle.add_argument("--modules", type=str, default=None, help="Bundled module source file.")
    p_bundle.add_argument("--content", action="store_true", help="Print the bundle text instead of a summary.")
    p_bundle.add_argument("--strict-modes", action="store_true", help="Fail on mode names without a code.")
    p_bundle.set_defaults(func=cmd_bundle)

    p_hash = sub.add_parser("hash", help="Print the content hash of a file.")
    p_hash.add_argument("file", type=str)
    p_hash.set_defaults(func=cmd_hash)

    p_registry = sub.add_parser("registry", help="Encode a JSON registry.")
    p_registry.add_argument("file", type=str)
    p_registry.add_argument("--typed", action="store_true", help="Keep string values quoted.")
    p_registry.set_defaults(func=cmd_registry)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except FormatterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: cannot read input: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: cannot encode input: {e}", file=sys.stderr)
        return 1
    return 0
