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

"""CLI entry point for validating and loading China sanctions data.

Exit codes:
  0  all files valid / all integrity checks passed
  1  at least one file invalid / integrity check failed / unknown schema type
  2  run-level error (missing sources or schema directory, missing schema)
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from ..exceptions import (
    KnowledgeGraphLoadError,
    SchemaLoadError,
    SchemaNotFoundError,
    SchemaRepositoryNotFoundError,
    SourcesNotFoundError,
)
from ..file_io.file_finder import YAML_SUFFIXES, FileFinder
from ..knowledge_graph import (
    KnowledgeGraphLoader,
    create_engine_for,
    announcement_details,
    entities_by_country,
    first_entry_details,
    run_integrity_checks,
)
from ..models.schema_loader import SchemaRepository
from ..models.schema_types import SchemaType
from ..resolvers.schema_resolver import schema_resolver
from ..validator import Validator
from ..validator_config import validator_config

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _names_document(path: str) -> bool:
    # A missing file named explicitly is still a document, reported as a parse failure
    candidate = Path(path)
    return candidate.is_file() or (not candidate.is_dir() and candidate.suffix.lower() in YAML_SUFFIXES)


def _validate(args: argparse.Namespace) -> int:
    validator = Validator(schema_repository=SchemaRepository(validator_config.schemas_dir))

    try:
        if args.path and _names_document(args.path):
            report = validator.validate_files([args.path])
        else:
            sources_dir = args.path or args.sources
            report = validator.validate_directory(sources_dir, max_workers=args.jobs)
    except (SourcesNotFoundError, SchemaRepositoryNotFoundError, SchemaLoadError) as e:
        print(f"Error: {e}")
        return EXIT_ERROR
    except SchemaNotFoundError as e:
        print(f"Schema error: {e}")
        return EXIT_ERROR

    if args.format == 'json':
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(report.render(verbose=args.verbose), end="")

    return EXIT_OK if report.valid else EXIT_INVALID


def _list(args: argparse.Namespace) -> int:
    finder = FileFinder(args.sources)

    if not finder.sources_exist():
        print(f"Error: Sources directory not found: {args.sources}")
        return EXIT_ERROR

    files = finder.find_all()
    if not files:
        print(f"No YAML files found in {args.sources}")
        return EXIT_OK

    print(f"YAML files in {args.sources}:")
    for file_path in files:
        print(f"  {file_path} ({schema_resolver.resolve(file_path)})")
    print(f"\nTotal: {len(files)} files")
    return EXIT_OK


def _schema(args: argparse.Namespace) -> int:
    try:
        schema_type = SchemaType.parse(args.type)
    except ValueError:
        print(f"Unknown schema type: {args.type}")
        print(f"Available types: {', '.join(SchemaType.get_all_types())}")
        return EXIT_INVALID

    repository = SchemaRepository(validator_config.schemas_dir)
    try:
        info = repository.describe(schema_type)
    except (SchemaNotFoundError, SchemaRepositoryNotFoundError, SchemaLoadError) as e:
        print(f"Schema error: {e}")
        return EXIT_ERROR

    print(f"{info.title} ({info.schema_type}): {info.path}")
    if info.description:
        print(info.description)
    if info.required:
        print(f"Required fields: {', '.join(info.required)}")
    return EXIT_OK


def _load(args: argparse.Namespace) -> int:
    engine = create_engine_for(args.db)
    try:
        loader = KnowledgeGraphLoader(engine)
        loader.create_schema()
        try:
            loader.load_from_directory(args.processed_dir)
        except KnowledgeGraphLoadError as e:
            print(f"Error: {e}")
            return EXIT_ERROR

        report = run_integrity_checks(
            engine,
            expected_entities=args.expected_entities,
            expected_entries=args.expected_entries,
        )
        print(report.render())

        if args.country:
            print(f"\nEntities registered in {args.country}:")
            for row in entities_by_country(engine, args.country):
                print(f"  - {row['english_name']}")

        announcement = announcement_details(engine)
        if announcement:
            print("\nAnnouncement details:")
            print(f"  ID: {announcement['id']}")
            print(f"  Number: {announcement['number']}")
            print(f"  Title: {announcement['title']}")

        entry = first_entry_details(engine)
        if entry:
            print("\nEntry with joined data:")
            print(f"  Entry: {entry['id']}")
            print(f"  Entity: {entry['english_name']}")
            print(f"  Announcement: {entry['number']}")
            print(f"  Status: {entry['status']}")
    finally:
        engine.dispose()

    return EXIT_OK if report.passed else EXIT_INVALID


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='data-cn',
        description='Validate and load China sanctions data',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    validate_parser = subparsers.add_parser('validate', help='Validate YAML files against JSON schemas')
    validate_parser.add_argument(
        'path',
        nargs='?',
        default=None,
        help='YAML file or sources directory to validate',
    )
    validate_parser.add_argument(
        '-s', '--sources',
        default=validator_config.sources_dir,
        help='Path to sources directory (default: %(default)s)',
    )
    validate_parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show detailed output for all files',
    )
    validate_parser.add_argument(
        '--format',
        choices=['human', 'json'],
        default='human',
        help='Output format (default: human)',
    )
    validate_parser.add_argument(
        '-j', '--jobs',
        type=int,
        default=validator_config.max_workers,
        help='Number of files validated in parallel (default: %(default)s)',
    )
    validate_parser.set_defaults(handler=_validate)

    list_parser = subparsers.add_parser('list', help='List all YAML files in sources directory')
    list_parser.add_argument(
        '-s', '--sources',
        default=validator_config.sources_dir,
        help='Path to sources directory (default: %(default)s)',
    )
    list_parser.set_defaults(handler=_list)

    schema_parser = subparsers.add_parser('schema', help='Show schema information')
    schema_parser.add_argument(
        'type',
        nargs='?',
        default=SchemaType.ANNOUNCEMENT.value,
        help=f"Schema type, one of: {', '.join(SchemaType.get_all_types())}",
    )
    schema_parser.set_defaults(handler=_schema)

    load_parser = subparsers.add_parser('load', help='Load processed data into SQLite and run integrity checks')
    load_parser.add_argument('processed_dir', help='Directory with processed YAML records')
    load_parser.add_argument(
        '--db',
        default=validator_config.db_path,
        help='SQLite database file, recreated on every run (default: %(default)s)',
    )
    load_parser.add_argument('--expected-entities', type=int, default=None, help='Expected number of entities')
    load_parser.add_argument('--expected-entries', type=int, default=None, help='Expected number of sanction entries')
    load_parser.add_argument('--country', default=None, help='List entities registered in this country')
    load_parser.set_defaults(handler=_load)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the data_cn CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    validator_config.set_logging()
    sys.exit(args.handler(args))


if __name__ == '__main__':
    main()
