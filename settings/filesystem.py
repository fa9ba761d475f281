"""
This module contains basic directory structures for the project.
"""
from pathlib import Path

ROOT = Path(__file__).parent.parent

# configs
CONFIGS_DIR = ROOT / "configs"
DEFAULT_CONFIG_LOC = CONFIGS_DIR / "default_config.yaml"
