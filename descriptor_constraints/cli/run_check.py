#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for checking bundle descriptor files."""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import validator_config
from ..schema import ConstraintsValidator
from . import check_files
from .report import CheckResult

logger = logging.getLogger(__name__)

DESCRIPTOR_FILE_NAMES = ('bundle.yaml', 'bundle.yml', 'bundle.json')


def find_descriptor_files(paths: List[str]) -> List[Path]:
    """Find all bundle descriptor files in given paths."""
    descriptor_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.warning(f"Path does not exist: {path}")
            continue

        if path.is_file():
            # Explicitly named files are checked whatever their name
            descriptor_files.append(path)
        elif path.is_dir():
            for name in DESCRIPTOR_FILE_NAMES:
                descriptor_files.extend(path.rglob(name))
        else:
            logger.warning(f"Path is neither file nor directory: {path}")

    return sorted(set(descriptor_files))


def _print_report(results: List[CheckResult], output_format: str) -> None:
    if output_format == 'json':
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'results': [r.to_dict() for r in results],
        }
        print(json.dumps(output, indent=2))
    elif output_format == 'github-actions':
        for result in results:
            for error in result.errors:
                location = f" ({error['path']})" if 'path' in error else ""
                print(f"::error file={result.file_path}::{error['message']}{location}")
    else:  # human-readable
        for result in results:
            if result.errors:
                print(f"\n{result.file_path}:")
                for error in result.errors:
                    print(f"  ERROR: {error['message']}")
                    if 'path' in error:
                        print(f"    at {error['path']}")
        if all(r.ok for r in results):
            print(f"Checked {len(results)} descriptor file(s) with no errors.")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the checker CLI.

    The report goes to stdout; diagnostics (missing paths, progress with
    ``--verbose``) go to stderr through the package logger.

    Returns:
        Process exit code: 0 when every file is valid, 1 otherwise
    """
    parser = argparse.ArgumentParser(
        description='Validate bundle descriptor files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='File paths or directories to check (default: current directory)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--max-depth',
        type=int,
        default=None,
        help=f'Maximum nesting depth walked (default: {validator_config.max_depth})',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log progress and union selection details',
    )

    args = parser.parse_args(argv)
    if args.max_depth is not None and args.max_depth < 1:
        parser.error(f'--max-depth must be a positive integer, got: {args.max_depth}')

    config = validator_config
    if args.verbose:
        config = dataclasses.replace(config, log_level='DEBUG')
    if args.max_depth is not None:
        config = dataclasses.replace(config, max_depth=args.max_depth)
    config.set_logging()

    descriptor_files = find_descriptor_files(args.paths or ['.'])

    if not descriptor_files:
        logger.error("No bundle descriptor files found.")
        return 1

    results = check_files(descriptor_files, validator=ConstraintsValidator(config))
    failed = [r for r in results if not r.ok]
    logger.info(f"Checked {len(results)} file(s), {len(failed)} with errors")

    _print_report(results, args.format)
    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
