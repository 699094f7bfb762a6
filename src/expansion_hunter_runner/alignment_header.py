"""
Header-only inspection of BAM/CRAM files with pysam.
No alignment records are read, so CRAM headers can be read without a reference.
"""

from typing import Any

import pysam
from loguru import logger

from expansion_hunter_runner.exceptions import MissingSampleIdError


def read_header(alignment_path: str) -> dict[str, Any]:
    # check_sq=False so a header without @SQ lines still opens
    with pysam.AlignmentFile(str(alignment_path), 'r', check_sq=False) as alignment_fh:
        return alignment_fh.header.to_dict()


def read_reference_lengths(alignment_path: str) -> list[int]:
    """Returns the LN of every @SQ line, in header order."""
    header = read_header(alignment_path)
    return [int(sq['LN']) for sq in header.get('SQ', [])]


def compute_genome_fingerprint(alignment_path: str) -> int:
    """
    Sums the declared reference sequence lengths. This total identifies the
    reference genome the file was aligned against.
    """
    lengths = read_reference_lengths(alignment_path)
    fingerprint = sum(lengths)
    logger.info(f'{alignment_path} declares {len(lengths)} reference sequences totalling {fingerprint} bp')
    return fingerprint


def read_sample_id(alignment_path: str) -> str:
    """
    Returns the SM tag of the first @RG line that has one, matching the first
    column reported by `samtools samples`.
    """
    header = read_header(alignment_path)
    for read_group in header.get('RG', []):
        sample_id = str(read_group.get('SM', '')).strip()
        if sample_id:
            logger.info(f'Sample ID for {alignment_path} is {sample_id}')
            return sample_id
    raise MissingSampleIdError(f'No @RG line with a sample (SM) name found in the header of {alignment_path}')
