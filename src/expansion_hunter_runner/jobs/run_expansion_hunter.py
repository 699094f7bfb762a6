"""
Builds and launches the ExpansionHunter command for one resolved input file.
"""

import subprocess
from typing import Any

from loguru import logger

from expansion_hunter_runner import constants, utils
from expansion_hunter_runner.job_types import ResolvedJobParameters


def build_expansion_hunter_command(params: ResolvedJobParameters, executable: str | None = None) -> list[str]:
    """
    Raises MissingParameterError if any parameter is empty, e.g. a genome
    build that has no variant catalog mapping.
    """
    params.check_complete()
    return [
        executable or constants.get_expansion_hunter_executable(),
        '--reads',
        params.input_file,
        '--reference',
        str(params.reference_path),
        '--variant-catalog',
        str(params.catalog_path),
        '--output-prefix',
        params.output_prefix,
        *constants.get_extra_args(),
    ]


def run(params: ResolvedJobParameters, dry_run: bool = False) -> subprocess.CompletedProcess[Any] | None:
    """
    Runs ExpansionHunter to completion. A non-zero exit raises
    subprocess.CalledProcessError carrying the tool's return code.
    """
    command = build_expansion_hunter_command(params)
    if dry_run:
        logger.info(f'Dry run, ExpansionHunter not started: {" ".join(command)}')
        return None

    utils.ensure_output_dir(params.output_dir)
    return utils.run_subprocess_with_log(command, f'ExpansionHunter {params.sample_id}')
