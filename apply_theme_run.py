import argparse
import logging
import pathlib
import sys
import zipfile
from typing import List, Optional

import docx
import yaml
from docx.opc.exceptions import PackageNotFoundError

from tablethemes.config import ThemeConfig, load_config
from tablethemes.docx_tables import apply_theme_to_document
from tablethemes.exceptions import (
    InvalidThemeIndexError, NoTableSelectedError, ThemeDefinitionError
)
from tablethemes.theming import CLEAR_THEME_INDEX, ThemeRegistry

import settings.filesystem as fs_settings

LOG_FMT = '[%(asctime)s]::%(name)s::%(levelname)-2s::%(message)s'

logger = logging.getLogger(name="apply_theme_run")


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="apply a table theme to the tables of a word document"
    )
    parser.add_argument("--input", type=str, default=None,
                        help="docx file containing the tables")
    parser.add_argument("--output", type=str, default=None,
                        help="where to save the themed document; defaults to "
                             "overwriting the input file")
    selector = parser.add_mutually_exclusive_group()
    selector.add_argument("--theme", type=int, default=None,
                          help="index of the theme in the catalog")
    selector.add_argument("--clear", action="store_true",
                          help="clear shading and fonts of the tables")
    parser.add_argument("--tables", type=int, nargs="+", default=None,
                        help="indices of the tables to theme, in document "
                             "order; all tables if omitted")
    parser.add_argument("--no_nested", action="store_true",
                        help="ignore tables nested in table cells")
    parser.add_argument("--themes_file", type=str, default=None,
                        help="yaml theme catalog; overrides the config")
    parser.add_argument("--config", type=str,
                        default=str(fs_settings.DEFAULT_CONFIG_LOC),
                        help="path to config file")
    parser.add_argument("--list_themes", action="store_true",
                        help="list the themes of the catalog and exit")
    return parser.parse_args(argv)


def setup_logging(level: str):
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FMT))
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level, logging.INFO))


def get_config(fp: str) -> ThemeConfig:
    if fp is not None and pathlib.Path(fp).exists():
        return load_config(fp)
    return ThemeConfig.default()


def main(argv: Optional[List[str]] = None) -> int:
    args = get_args(argv)
    try:
        config = get_config(args.config)
    except (ValueError, TypeError, AttributeError, yaml.YAMLError) as e:
        setup_logging("INFO")
        logger.error(
            f"invalid config {args.config}: {e.__class__.__name__}: {e}"
        )
        return 2

    setup_logging(config.log_level)

    themes_file = args.themes_file or config.themes_file
    try:
        if themes_file is not None:
            registry = ThemeRegistry.from_yaml(themes_file)
        else:
            registry = ThemeRegistry.builtin()
    except (ThemeDefinitionError, OSError) as e:
        logger.error(f"could not load themes: {e.__class__.__name__}: {e}")
        return 2

    if args.list_themes:
        for idx, name in enumerate(registry.names()):
            print(f"{idx:>3}  {name}")
        return 0

    if args.input is None:
        logger.error("--input is required")
        return 2

    if args.theme is None and not args.clear:
        logger.error("one of --theme or --clear is required")
        return 2

    selector = CLEAR_THEME_INDEX if args.clear else args.theme

    try:
        word_doc = docx.Document(args.input)
    except (PackageNotFoundError, zipfile.BadZipFile) as e:
        logger.error(
            f"could not open {args.input}: {e.__class__.__name__}: {e}"
        )
        return 2

    try:
        apply_theme_to_document(
            word_doc,
            selector=selector,
            registry=registry,
            table_indices=args.tables,
            include_nested=config.include_nested_tables and not args.no_nested,
            shading_pattern=config.shading_pattern
        )
    except (InvalidThemeIndexError, NoTableSelectedError) as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        return 1

    output = args.output or args.input
    word_doc.save(output)
    logger.info(f"saved {output}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
