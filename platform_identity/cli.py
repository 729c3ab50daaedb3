"""
Command line interface for platform identity resolution.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .architecture import Architecture
from .config import build_store, get_default_config_path, load_config
from .exceptions import PlatformIdentityError
from .logging_config import setup_logging
from .operating_system import OS
from .os_version import OSVersion
from .properties.catalog import SystemProperties
from .properties.types import StringProperty
from .resolver import resolve_platform
from .version import get_full_name_with_version

logger = logging.getLogger(__name__)

VERSIONED_OS_CHOICES = [os.name.lower() for os in OS.known_values() if os.versions]


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='platform-identity',
        description='Resolve OS, OS version and architecture names into canonical values'
    )
    parser.add_argument('--version', action='version', version=get_full_name_with_version())
    parser.add_argument('-c', '--config', help='Path to YAML configuration file')
    parser.add_argument('--log-level', help='Logging level (DEBUG, INFO, WARNING, ERROR)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose log output')
    parser.add_argument('--json', action='store_true', help='Print results as JSON')
    parser.add_argument('--set', action='append', default=[], metavar='KEY=VALUE',
                        help='Override a raw property (repeatable)')

    subparsers = parser.add_subparsers(dest='command')

    subparsers.add_parser('show', help='Resolve the current platform (default)')

    os_parser = subparsers.add_parser('os', help='Resolve an OS name')
    os_parser.add_argument('name', help='Raw OS name, e.g. "Windows 10"')

    arch_parser = subparsers.add_parser('arch', help='Resolve an architecture name')
    arch_parser.add_argument('name', help='Raw architecture name, e.g. "x86_64"')

    version_parser = subparsers.add_parser('version', help='Resolve an OS version')
    version_parser.add_argument('os', choices=VERSIONED_OS_CHOICES, help='Operating system')
    version_parser.add_argument('value', help='Version number, or full name with --by-name')
    version_parser.add_argument('--by-name', action='store_true',
                                help='Treat VALUE as a full version name, e.g. "macOS Catalina"')

    property_parser = subparsers.add_parser('property', help='Print a raw property value')
    property_parser.add_argument('key', nargs='?', help='Property key; all known keys if omitted')

    return parser


def _parse_overrides(assignments: List[str]) -> Dict[str, str]:
    overrides = {}
    for assignment in assignments:
        key, sep, value = assignment.partition('=')
        if not sep or not key:
            raise PlatformIdentityError(f"Invalid --set value, expected KEY=VALUE: {assignment!r}")
        overrides[key] = value
    return overrides


def _version_dict(version: OSVersion) -> Dict[str, Any]:
    if version.is_unknown():
        return {"full_name": None, "version_number": None}
    return {"full_name": version.full_name, "version_number": version.version_number}


def _print(result: Dict[str, Any], as_json: bool) -> None:
    if as_json:
        print(json.dumps(result, indent=2))
        return

    width = max(len(key) for key in result) if result else 0
    for key, value in result.items():
        print(f"{key.ljust(width)}  {'unknown' if value is None else value}")


def run(args: argparse.Namespace) -> int:
    """Run a parsed command and return the process exit status."""
    config = load_config(args.config or get_default_config_path())
    setup_logging(args.log_level or config.logging.level, config.logging.log_file,
                  args.verbose or config.logging.verbose)
    config.store.overrides.update(_parse_overrides(args.set))

    command = args.command or 'show'

    if command == 'os':
        os = OS.from_name(args.name)
        _print({"os": os.friendly_name, "member": os.name}, args.json)
        return 1 if os is OS.UNKNOWN else 0

    if command == 'arch':
        architecture = Architecture.from_name(args.name)
        _print({"architecture": architecture.friendly_name, "member": architecture.name}, args.json)
        return 1 if architecture is Architecture.UNKNOWN else 0

    if command == 'version':
        os = OS[args.os.upper()]
        if args.by_name:
            version = os.get_version_by_name(args.value)
        else:
            version = os.get_version_by_version_number(args.value)
        _print(_version_dict(version), args.json)
        return 1 if version.is_unknown() else 0

    store = build_store(config)

    if command == 'property':
        if args.key:
            value = StringProperty(args.key, store=store).get()
            _print({args.key: value}, args.json)
            return 1 if value is None else 0
        properties = SystemProperties(store).all()
        _print({key: prop.get_raw() for key, prop in sorted(properties.items())}, args.json)
        return 0

    identity = resolve_platform(store)
    if args.json:
        _print(identity.to_dict(), True)
    else:
        _print({
            "OS": identity.os.friendly_name,
            "OS version": None if identity.os_version.is_unknown() else
            f"{identity.os_version.full_name} ({identity.os_version.version_number})",
            "Architecture": identity.architecture.friendly_name,
        }, False)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        return run(args)
    except PlatformIdentityError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
