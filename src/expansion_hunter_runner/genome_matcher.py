"""
Works out which reference genome an input file was aligned against and which
variant catalog goes with it. Either decision is skipped when the user
supplied the value explicitly.
"""

from collections.abc import Callable
from functools import partial

from loguru import logger

from expansion_hunter_runner import constants, genome_builds
from expansion_hunter_runner.alignment_header import compute_genome_fingerprint
from expansion_hunter_runner.job_types import GenomeResolution


def resolve(
    fingerprint: int | Callable[[], int],
    explicit_reference: str | None = None,
    explicit_catalog: str | None = None,
    input_file: str = '<unknown file>',
    ref_dir: str | None = None,
    catalog_dir: str | None = None,
) -> GenomeResolution:
    """
    `fingerprint` may be a zero-argument callable, in which case it is only
    called when the reference has to be inferred. An explicit reference is
    taken as-is and is not checked against the file's header.

    Raises UnresolvedGenomeError when the fingerprint matches no known build.
    """
    build_id: str | None = None

    if explicit_reference:
        reference_path = explicit_reference
        logger.info(f'Using the supplied reference {reference_path} for {input_file}')
    else:
        total_length = fingerprint() if callable(fingerprint) else fingerprint
        record = genome_builds.lookup_genome_build(total_length, input_file=input_file)
        build_id = record.build_id
        reference_path = record.reference_path(ref_dir or constants.get_ref_dir())
        logger.info(
            f'The file {input_file} was likely mapped to {build_id} corresponding to the refseq {reference_path}.'
        )

    if explicit_catalog:
        logger.info(f'Using the supplied variant catalog: {explicit_catalog}')
        return GenomeResolution(build_id=build_id, reference_path=reference_path, catalog_path=explicit_catalog)

    return GenomeResolution(
        build_id=build_id,
        reference_path=reference_path,
        catalog_path=select_variant_catalog(build_id, catalog_dir=catalog_dir),
    )


def select_variant_catalog(build_id: str | None, catalog_dir: str | None = None) -> str | None:
    """Returns the catalog for `build_id`, or None when no catalog group covers it."""
    group = genome_builds.lookup_catalog_group(build_id)
    if group is None:
        # Left for the pre-launch parameter check to report
        logger.warning(
            f'No variant catalog is known for genome build {build_id or "<unknown>"}, '
            'supply one with the -c flag.'
        )
        return None

    catalog_path = group.catalog_path(catalog_dir or constants.get_catalog_dir())
    logger.info(f'Using the following variant catalog: {catalog_path}')
    return catalog_path


def match_genome(
    input_file: str,
    explicit_reference: str | None = None,
    explicit_catalog: str | None = None,
    fingerprint_reader: Callable[[str], int] | None = None,
) -> GenomeResolution:
    """Resolves the genome for `input_file`, reading its header only when needed."""
    return resolve(
        fingerprint=partial(fingerprint_reader or compute_genome_fingerprint, input_file),
        explicit_reference=explicit_reference,
        explicit_catalog=explicit_catalog,
        input_file=input_file,
    )
