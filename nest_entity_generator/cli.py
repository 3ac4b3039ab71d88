import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from nest_entity_generator.config import load_config
from nest_entity_generator.constants import TableNameFallback
from nest_entity_generator.descriptor_schema import load_entity_file
from nest_entity_generator.exceptions import EntityGeneratorError
from nest_entity_generator.renderer import render

from nest_entity_generator.colored_logging import (
    setup_colored_logging,
    get_colored_logger,
    log_success,
    log_progress,
    log_highlight,
    log_section,
)


logger = get_colored_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nest-entity-gen",
        description="Generate a TypeORM entity class for NestJS from a YAML or JSON entity description.",
    )
    parser.add_argument(
        "entity_file",
        help="Path to the entity document (name, tableName, includeTimestamps, properties).",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_path",
        help="File to write the entity to. Overrides config file setting. Defaults to stdout.",
    )
    parser.add_argument(
        "--table-name-fallback",
        choices=TableNameFallback.ALL,
        default=None,
        help="What to emit in @Entity() when tableName is empty.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose DEBUG logging.",
    )
    parser.add_argument(
        "--no-color",
        dest="use_colors",
        action="store_false",
        default=None,
        help="Disable colored output (useful for CI/CD environments).",
    )
    return parser


def write_output(code: str, output_path: Optional[str]) -> None:
    """Write the entity to ``output_path`` exactly as rendered, or to stdout."""
    if output_path is None:
        sys.stdout.write(code + "\n")
        return

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(code)
    log_success(logger, f"Entity written to {path}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Logging from explicit flags first, so config loading can already log
    setup_colored_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        use_colors=args.use_colors is not False,
    )

    verbose = bool(args.verbose)
    try:
        config = load_config(args.config, args)
        verbose = config.verbose
        setup_colored_logging(
            level=logging.DEBUG if config.verbose else logging.INFO,
            use_colors=config.use_colors,
        )
        logger.debug(f"Effective configuration: {config.model_dump()}")

        log_section(logger, "Entity generation")
        log_progress(logger, f"Loading entity document {args.entity_file}...")
        entity = load_entity_file(args.entity_file)
        log_highlight(logger, f"Found entity '{entity.name}' with {len(entity.properties)} properties")

        code = render(entity, table_name_fallback=config.table_name_fallback)
        write_output(code, config.output_path)

    except EntityGeneratorError as e:
        logger.error(str(e), exc_info=verbose)
        return 1
    except OSError as e:
        logger.error(f"Could not write output: {e}", exc_info=verbose)
        return 1
    except Exception as e:
        logger.error(f"An unexpected error occurred during generation: {e}", exc_info=True)
        return 1

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
