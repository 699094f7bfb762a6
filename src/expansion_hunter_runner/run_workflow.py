#!/usr/bin/env python3


import os
import subprocess
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from cpg_utils.config import set_config_paths
from loguru import logger

from expansion_hunter_runner import constants, parameter_resolver
from expansion_hunter_runner.exceptions import ExpansionHunterRunnerError
from expansion_hunter_runner.jobs import run_expansion_hunter

DESCRIPTION = """\
Find repeat expansions in Illumina short-read genome sequencing with ExpansionHunter v5+.

Run as a job array with one task per line of the input file, e.g.
  sbatch --array 0-(n-1 bam files) expansion_hunter.sbatch -i inputFile.txt
"""


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog='expansion-hunter-runner',
        description=DESCRIPTION,
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '-i',
        dest='manifest',
        metavar='inputFile.txt',
        help='REQUIRED. Text file with a list of bam or cram files including the full path to each file.',
    )
    parser.add_argument(
        '-g',
        dest='reference',
        help='Path to the reference the files were mapped to. '
        'If not set, the reference is identified from the @SQ lines in the file header.',
    )
    parser.add_argument(
        '-c',
        dest='catalog',
        help='Custom variant catalog. If not set, a full catalog matching the genome build is used.',
    )
    parser.add_argument(
        '-o',
        dest='output_dir',
        help='Output directory (default: <users_dir>/<user>/expansionHunter/output/<sample>).',
    )
    parser.add_argument('--dry-run', action='store_true', help='Resolve and log the command without running it')
    return parser


def _configure_runtime() -> None:
    # Packaged defaults first so that files in CPG_CONFIG_PATH override them
    user_config_paths = [path for path in os.getenv('CPG_CONFIG_PATH', '').split(',') if path]
    set_config_paths([str(constants.DEFAULT_CONFIG_PATH), *user_config_paths])

    logger.remove()
    logger.add(sys.stderr, level=constants.get_log_level())


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.manifest:
        parser.print_usage(sys.stderr)
        logger.error(constants.MISSING_MANIFEST_MESSAGE)
        return 1

    _configure_runtime()

    try:
        params = parameter_resolver.resolve_job_parameters(
            manifest_path=args.manifest,
            task_index=parameter_resolver.read_task_index(),
            reference=args.reference,
            catalog=args.catalog,
            output_dir=args.output_dir,
        )
        run_expansion_hunter.run(params, dry_run=args.dry_run)
    except subprocess.CalledProcessError as e:
        return e.returncode
    except (ExpansionHunterRunnerError, OSError, ValueError) as e:
        logger.error(str(e))
        return 1
    return 0


def cli_main():
    sys.exit(main())


if __name__ == '__main__':
    cli_main()
