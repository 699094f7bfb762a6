"""
Static tables that identify a reference genome from the total length of the
sequences declared in an alignment header, and that pair each genome build
with the ExpansionHunter variant catalog built for it.

Two reference sets that happen to sum to the same length cannot be told apart.
Fingerprints in GENOME_BUILDS are unique, so every lookup is an exact match.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from cpg_utils import to_path

from expansion_hunter_runner.exceptions import UnresolvedGenomeError


@dataclass(frozen=True)
class GenomeBuildRecord:
    fingerprint: int
    build_id: str
    reference_filename: str

    def reference_path(self, ref_dir: str) -> str:
        return str(to_path(ref_dir) / self.reference_filename)


@dataclass(frozen=True)
class CatalogGroup:
    """A set of interchangeable builds that share one variant catalog."""

    name: str
    build_ids: frozenset[str]
    catalog_filename: str

    def catalog_path(self, catalog_dir: str) -> str:
        return str(to_path(catalog_dir) / self.catalog_filename)


_GENOME_BUILD_RECORDS: Final = (
    GenomeBuildRecord(3099922541, 'GRCh38', 'GCA_000001405.15_GRCh38_no_alt_analysis_set.fna.gz'),
    GenomeBuildRecord(3217346917, 'hs38DH', 'hs38DH.fa'),
    GenomeBuildRecord(3137454505, 'hs37d5', 'hs37d5.fa.gz'),
    GenomeBuildRecord(2730871774, 'GRCm38', 'GRCm38_68.fa'),
    GenomeBuildRecord(3117463893, 'CHM13v2', 'T2T_CHM13v2.0.ucsc.ebv.fa.gz'),
    GenomeBuildRecord(3137161264, 'hg19', 'ucsc.hg19.fasta'),
    GenomeBuildRecord(3105715063, 'GRCh38.hs38d1', 'GCA_000001405.15_GRCh38_no_alt_plus_hs38d1_analysis_set.fna.gz'),
    GenomeBuildRecord(3099750718, 'GRCh38', 'Homo_sapiens.GRCh38.dna.primary_assembly.fa'),
    GenomeBuildRecord(
        3031042417,
        'GRCh38.blacklist',
        'Homo_sapiens.GRCh38.dna.primary_assembly.fa.r101.s501.blacklist.gz',
    ),
    GenomeBuildRecord(3101804741, 'hg19_1stM_unmask_ran_all', 'hg19_1stM_unmask_ran_all.fa'),
)

GENOME_BUILDS: Final[Mapping[int, GenomeBuildRecord]] = MappingProxyType(
    {record.fingerprint: record for record in _GENOME_BUILD_RECORDS}
)
assert len(GENOME_BUILDS) == len(_GENOME_BUILD_RECORDS), 'Genome fingerprints must be unique'

CATALOG_GROUPS: Final = (
    CatalogGroup(
        name='GRCh38',
        build_ids=frozenset({'GRCh38', 'hs38DH', 'GRCh38.hs38d1', 'GRCh38.blacklist'}),
        catalog_filename='variant_catalog_with_offtargets.GRCh38.json',
    ),
    CatalogGroup(
        name='GRCh37',
        build_ids=frozenset({'hg19', 'hg19_1stM_unmask_ran_all', 'hs37d5'}),
        catalog_filename='variant_catalog_with_offtargets.GRCh37.json',
    ),
    CatalogGroup(
        name='CHM13v2',
        build_ids=frozenset({'CHM13v2'}),
        catalog_filename='variant_catalog_without_offtargets.CHM13v2.json',
    ),
)

CATALOG_GROUP_BY_BUILD: Final[Mapping[str, CatalogGroup]] = MappingProxyType(
    {build_id: group for group in CATALOG_GROUPS for build_id in group.build_ids}
)
assert len(CATALOG_GROUP_BY_BUILD) == sum(len(group.build_ids) for group in CATALOG_GROUPS), (
    'A genome build can belong to only one catalog group'
)


def lookup_genome_build(fingerprint: int, input_file: str = '<unknown file>') -> GenomeBuildRecord:
    """
    Returns the build whose total sequence length equals `fingerprint`.
    There is no tolerance: a single base of difference is a miss.
    """
    try:
        return GENOME_BUILDS[fingerprint]
    except KeyError:
        raise UnresolvedGenomeError(input_file=input_file, fingerprint=fingerprint) from None


def lookup_catalog_group(build_id: str | None) -> CatalogGroup | None:
    if build_id is None:
        return None
    return CATALOG_GROUP_BY_BUILD.get(build_id)
