import re
import subprocess
from typing import Any

import cpg_utils
from loguru import logger

from expansion_hunter_runner.exceptions import FilesystemError


def validate_path_component(value: str, arg_name: str) -> None:
    """
    Validates that a value taken from file metadata can be used as a single
    directory or file name: no path separators, shell metacharacters or whitespace.
    """
    if value in {'.', '..'} or re.search(r'[/\\;&|$`(){}[\]<>*?!#\s]', value):
        logger.error(f'Invalid characters found in {arg_name}: {value!r}')
        raise ValueError(f'Potential unsafe characters in {arg_name}: {value!r}')
    logger.info(f'Path validation passed for {arg_name}.')


def ensure_output_dir(output_dir: str) -> cpg_utils.Path:
    """Creates `output_dir` and any missing parents. Existing directories are left alone."""
    path = cpg_utils.to_path(output_dir)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f'Could not create output directory {output_dir}: {e}')
        raise FilesystemError(f'Could not create output directory {output_dir}: {e}') from e
    logger.info(f'Output directory {output_dir} is ready')
    return path


def run_subprocess_with_log(
    cmd: list[str],
    step_name: str,
) -> subprocess.CompletedProcess[Any]:
    """
    Runs a subprocess command with robust logging.
    Logs the command, its output, and errors if any occur.
    """
    cmd_str = ' '.join(cmd)
    logger.info(f'Running {step_name} command: {cmd_str}')
    try:
        process: subprocess.CompletedProcess[str] = subprocess.run(  # noqa: S603
            cmd,
            check=True,
            capture_output=True,
            text=True,
        )
        logger.info(f'{step_name} completed successfully.')
        if process.stdout:
            logger.info(f'{step_name} STDOUT:\n{process.stdout.strip()}')
        if process.stderr:
            logger.info(f'{step_name} STDERR:\n{process.stderr.strip()}')
        return process
    except subprocess.CalledProcessError as e:
        logger.error(f'{step_name} failed with return code {e.returncode}')
        logger.error(f'CMD: {cmd_str}')
        logger.error(f'STDOUT: {e.stdout}')
        logger.error(f'STDERR: {e.stderr}')
        raise
