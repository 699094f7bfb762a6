"""
Unit tests for the static genome fingerprint and variant catalog tables.
"""

import pytest

from expansion_hunter_runner.exceptions import UnresolvedGenomeError
from expansion_hunter_runner.genome_builds import (
    CATALOG_GROUP_BY_BUILD,
    CATALOG_GROUPS,
    GENOME_BUILDS,
    lookup_catalog_group,
    lookup_genome_build,
)

EXPECTED_BUILDS = {
    3099922541: ('GRCh38', 'GCA_000001405.15_GRCh38_no_alt_analysis_set.fna.gz'),
    3217346917: ('hs38DH', 'hs38DH.fa'),
    3137454505: ('hs37d5', 'hs37d5.fa.gz'),
    2730871774: ('GRCm38', 'GRCm38_68.fa'),
    3117463893: ('CHM13v2', 'T2T_CHM13v2.0.ucsc.ebv.fa.gz'),
    3137161264: ('hg19', 'ucsc.hg19.fasta'),
    3105715063: ('GRCh38.hs38d1', 'GCA_000001405.15_GRCh38_no_alt_plus_hs38d1_analysis_set.fna.gz'),
    3099750718: ('GRCh38', 'Homo_sapiens.GRCh38.dna.primary_assembly.fa'),
    3031042417: ('GRCh38.blacklist', 'Homo_sapiens.GRCh38.dna.primary_assembly.fa.r101.s501.blacklist.gz'),
    3101804741: ('hg19_1stM_unmask_ran_all', 'hg19_1stM_unmask_ran_all.fa'),
}

# --- Tests for the fingerprint table ---


def test_genome_builds_table_contents():
    """
    The table holds exactly the known assemblies, keyed by total sequence length.
    """
    assert {fp: (r.build_id, r.reference_filename) for fp, r in GENOME_BUILDS.items()} == EXPECTED_BUILDS


@pytest.mark.parametrize(('fingerprint', 'expected'), EXPECTED_BUILDS.items())
def test_lookup_genome_build_exact(fingerprint, expected):
    record = lookup_genome_build(fingerprint)
    assert (record.build_id, record.reference_filename) == expected
    assert record.fingerprint == fingerprint


def test_reference_path_joins_ref_dir():
    record = lookup_genome_build(3099922541)
    assert record.reference_path('/refs') == '/refs/GCA_000001405.15_GRCh38_no_alt_analysis_set.fna.gz'


@pytest.mark.parametrize('fingerprint', [999999, 0, 3099922540, 3099922542, 3217346918])
def test_lookup_genome_build_miss(fingerprint):
    """
    Lookup is exact: values one base away from a known build are misses.
    """
    with pytest.raises(UnresolvedGenomeError, match=str(fingerprint)) as excinfo:
        lookup_genome_build(fingerprint, input_file='/data/unknown.bam')

    assert excinfo.value.fingerprint == fingerprint
    assert excinfo.value.input_file == '/data/unknown.bam'
    assert '-g' in str(excinfo.value)


def test_genome_builds_is_read_only():
    with pytest.raises(TypeError):
        GENOME_BUILDS[1] = GENOME_BUILDS[3099922541]  # type: ignore[index]


# --- Tests for the catalog groups ---


@pytest.mark.parametrize('build_id', ['GRCh38', 'hs38DH', 'GRCh38.hs38d1', 'GRCh38.blacklist'])
def test_grch38_family_catalog(build_id):
    group = lookup_catalog_group(build_id)
    assert group is not None
    assert group.catalog_filename == 'variant_catalog_with_offtargets.GRCh38.json'


@pytest.mark.parametrize('build_id', ['hg19', 'hg19_1stM_unmask_ran_all', 'hs37d5'])
def test_grch37_family_catalog(build_id):
    group = lookup_catalog_group(build_id)
    assert group is not None
    assert group.catalog_filename == 'variant_catalog_with_offtargets.GRCh37.json'


def test_chm13v2_catalog():
    group = lookup_catalog_group('CHM13v2')
    assert group is not None
    assert group.catalog_filename == 'variant_catalog_without_offtargets.CHM13v2.json'
    assert group.catalog_path('/catalogs') == '/catalogs/variant_catalog_without_offtargets.CHM13v2.json'


@pytest.mark.parametrize('build_id', ['GRCm38', None, 'grch38', ''])
def test_unmapped_builds_have_no_catalog(build_id):
    assert lookup_catalog_group(build_id) is None


def test_every_human_build_has_a_catalog():
    """
    GRCm38 is the only build in the fingerprint table without a catalog.
    """
    unmapped = {r.build_id for r in GENOME_BUILDS.values()} - set(CATALOG_GROUP_BY_BUILD)
    assert unmapped == {'GRCm38'}
    assert len(CATALOG_GROUPS) == 3
