from dataclasses import dataclass
import pathlib
from typing import Optional, Union

import yaml

from tablethemes.docx_tables.commit import SHADING_PATTERNS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ThemeConfig:
    # themes
    themes_file: Optional[str] = None

    # docx
    include_nested_tables: bool = True
    shading_pattern: str = "clear"

    # logging
    log_level: str = "INFO"

    def __post_init__(self):
        if self.shading_pattern not in SHADING_PATTERNS:
            raise ValueError(
                f"Invalid shading pattern: {self.shading_pattern}. "
                f"Must be one of: {SHADING_PATTERNS}"
            )

        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

    @classmethod
    def default(cls) -> "ThemeConfig":
        return cls()


def load_config(fp: Union[str, pathlib.Path]) -> ThemeConfig:
    fp = pathlib.Path(fp)
    with fp.open(mode='r') as f:
        data = yaml.safe_load(f) or {}

    kwargs = {}
    for d in data.values():
        kwargs.update({k.lower(): v for k, v in (d or {}).items()})

    return ThemeConfig(**kwargs)
