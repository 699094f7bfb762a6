"""
Global pytest configuration and fixtures.
"""

from collections.abc import Callable
from functools import reduce
from pathlib import Path
from unittest import mock

import pysam
import pytest

# Minimal mock config based on expansion_hunter_runner_defaults.toml.
MOCK_CONFIG = {
    'expansion_hunter': {
        'ref_dir': '/refs',
        'catalog_dir': '/catalogs',
        'executable': '/opt/ExpansionHunter/bin/ExpansionHunter',
        'users_dir': '/hpcfs/users',
        'extra_args': [],
        'log_level': 'INFO',
    },
    'scheduler': {
        'array_task_env': 'SLURM_ARRAY_TASK_ID',
    },
}


def _mock_config_retrieve(keys, default=None):
    """
    A helper function that simulates the real config_retrieve
    by traversing the MOCK_CONFIG dictionary.
    """
    try:
        return reduce(lambda d, k: d[k], keys, MOCK_CONFIG)
    except (KeyError, TypeError):
        if default is not None:
            return default
        raise KeyError(f'Mock config key not found in MOCK_CONFIG: {keys}')


@pytest.fixture(autouse=True)
def mock_cpg_utils_config():
    """
    Every config lookup goes through expansion_hunter_runner.constants,
    so patching it there keeps tests away from real TOML files.
    """
    with mock.patch('expansion_hunter_runner.constants.config_retrieve') as mock_retrieve:
        mock_retrieve.side_effect = _mock_config_retrieve
        yield mock_retrieve


@pytest.fixture
def make_bam(tmp_path: Path) -> Callable[..., str]:
    """Returns a factory that writes a header-only BAM file and returns its path."""

    def _make_bam(
        name: str = 'sample.bam',
        sq_lengths: list[int] | None = None,
        sample_id: str | None = 'NA12878',
    ) -> str:
        header: dict = {
            'HD': {'VN': '1.6', 'SO': 'coordinate'},
            'SQ': [{'SN': f'chr{i + 1}', 'LN': length} for i, length in enumerate(sq_lengths or [1000])],
        }
        if sample_id is not None:
            header['RG'] = [{'ID': 'rg1', 'SM': sample_id, 'PL': 'ILLUMINA'}]

        bam_path = tmp_path / name
        with pysam.AlignmentFile(str(bam_path), 'wb', header=header):
            pass
        return str(bam_path)

    return _make_bam


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[..., str]:
    def _write_manifest(input_files: list[str], name: str = 'input_files.txt') -> str:
        manifest_path = tmp_path / name
        manifest_path.write_text(''.join(f'{path}\n' for path in input_files))
        return str(manifest_path)

    return _write_manifest
