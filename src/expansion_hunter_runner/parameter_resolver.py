"""
Turns the command-line options and the scheduler's job-array index into the
full set of parameters for one ExpansionHunter run.
"""

import getpass
import os
from collections.abc import Callable, Mapping

import cpg_utils
from loguru import logger

from expansion_hunter_runner import constants, genome_matcher, utils
from expansion_hunter_runner.alignment_header import read_sample_id
from expansion_hunter_runner.exceptions import UsageError
from expansion_hunter_runner.job_types import ResolvedJobParameters


def load_manifest(manifest_path: str | None) -> tuple[str, ...]:
    """
    Reads the newline-separated list of BAM/CRAM paths. Blank lines are skipped,
    so the job-array index counts non-blank lines only.
    """
    if not manifest_path:
        raise UsageError(constants.MISSING_MANIFEST_MESSAGE)

    with cpg_utils.to_path(manifest_path).open() as manifest_fh:
        input_files = tuple(line.strip() for line in manifest_fh if line.strip())

    logger.info(f'Loaded {len(input_files)} input files from {manifest_path}')
    return input_files


def read_task_index(environ: Mapping[str, str] | None = None) -> int:
    """
    Reads this task's job-array index from the environment. An unset index
    selects the first manifest entry.
    """
    environ = os.environ if environ is None else environ
    env_name: str = constants.get_array_task_env()
    raw_index = environ.get(env_name, '').strip()
    if not raw_index:
        logger.warning(f'{env_name} is not set, processing the first file in the manifest')
        return 0
    try:
        return int(raw_index)
    except ValueError:
        raise UsageError(f'{env_name} must be an integer job-array index, got {raw_index!r}') from None


def select_input_file(input_files: tuple[str, ...], task_index: int) -> str:
    if not 0 <= task_index < len(input_files):
        raise UsageError(
            f'Job-array index {task_index} is out of range for a manifest of {len(input_files)} files. '
            f'Submit the array as 0-{len(input_files) - 1}.'
        )

    input_file = input_files[task_index]
    if not cpg_utils.to_path(input_file).exists():
        raise FileNotFoundError(f'Input file {input_file} (job-array index {task_index}) does not exist')

    logger.info(f'Job-array index {task_index} selected {input_file}')
    return input_file


def default_output_dir(sample_id: str, user_base: str | None = None) -> str:
    if user_base is None:
        user_base = str(cpg_utils.to_path(constants.get_users_dir()) / getpass.getuser())
    return str(cpg_utils.to_path(user_base) / constants.OUTPUT_SUBDIR / sample_id)


def resolve_job_parameters(  # noqa: PLR0913
    manifest_path: str | None,
    task_index: int,
    reference: str | None = None,
    catalog: str | None = None,
    output_dir: str | None = None,
    fingerprint_reader: Callable[[str], int] | None = None,
    sample_reader: Callable[[str], str] | None = None,
) -> ResolvedJobParameters:
    """
    Selects this task's input file and fills in every parameter the user left out.
    The sample ID is read before the output directory is defaulted, since the
    default directory is named after the sample.
    """
    input_file = select_input_file(load_manifest(manifest_path), task_index)

    sample_id = (sample_reader or read_sample_id)(input_file)
    utils.validate_path_component(sample_id, 'sample ID')

    resolution = genome_matcher.match_genome(
        input_file,
        explicit_reference=reference,
        explicit_catalog=catalog,
        fingerprint_reader=fingerprint_reader,
    )

    if not output_dir:
        output_dir = default_output_dir(sample_id)
        logger.info(f'Using {output_dir} as the output directory')

    return ResolvedJobParameters(
        input_file=input_file,
        sample_id=sample_id,
        reference_path=resolution.reference_path,
        catalog_path=resolution.catalog_path,
        output_dir=output_dir,
    )
