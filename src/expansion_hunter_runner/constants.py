"""
Site paths and settings read from the cpg_utils TOML configuration.
Values are looked up when called, so importing this module never reads config.
"""

from pathlib import Path as LocalPath
from typing import Final

from cpg_utils.config import config_retrieve

DEFAULT_CONFIG_PATH: Final = LocalPath(__file__).parent / 'expansion_hunter_runner_defaults.toml'
DEFAULT_ARRAY_TASK_ENV: Final = 'SLURM_ARRAY_TASK_ID'
OUTPUT_SUBDIR: Final = 'expansionHunter/output'
MISSING_MANIFEST_MESSAGE: Final = (
    'You need to give me a text file with a list of BAM or CRAM files including the full path to each file.'
)


def get_ref_dir() -> str:
    return config_retrieve(['expansion_hunter', 'ref_dir'])


def get_catalog_dir() -> str:
    return config_retrieve(['expansion_hunter', 'catalog_dir'])


def get_expansion_hunter_executable() -> str:
    return config_retrieve(['expansion_hunter', 'executable'])


def get_users_dir() -> str:
    """Parent of the per-user directories that hold the default output tree."""
    return config_retrieve(['expansion_hunter', 'users_dir'])


def get_extra_args() -> list[str]:
    return [str(arg) for arg in config_retrieve(['expansion_hunter', 'extra_args'], default=[])]


def get_log_level() -> str:
    return config_retrieve(['expansion_hunter', 'log_level'], default='INFO')


def get_array_task_env() -> str:
    return config_retrieve(['scheduler', 'array_task_env'], default=DEFAULT_ARRAY_TASK_ENV)
