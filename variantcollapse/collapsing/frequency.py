# File: variantcollapse/collapsing/frequency.py
# Location: variantcollapse/variantcollapse/collapsing/frequency.py
"""
Allele frequency estimators used by the weighted collapsing methods.

Provides public functions:

- ``marker_frequency``: Madsen-Browning allele frequency over all samples
  with a called genotype. No pseudocount; 0.0 for an all-missing marker.
- ``marker_frequency_from_controls``: Allele frequency over non-case
  samples with the (ac + 1) / (an + 2) continuity correction from
  Madsen & Browning (2009), which keeps the estimate strictly inside (0, 1).
- ``marker_frequencies``: Either estimator applied to every marker column.
- ``group_frequency``: Group marker indices that share the same frequency.

Design notes
------------
- A genotype is missing when it is negative (or NaN). Missing calls add
  nothing to either the allele count or the allele number.
- Dosages may be fractional (imputed), so the allele count is a float.
- The diploid assumption is fixed: each called genotype adds 2 alleles.

Reference: Madsen BE, Browning SR. A Groupwise Association Test for Rare
Mutations Using a Weighted Sum Statistic. PLoS Genet. 2009;5(2):e1000384.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from variantcollapse.collapsing.matrix import (
    as_genotype_matrix,
    as_phenotype_vector,
    check_marker_index,
)

logger = logging.getLogger("variantcollapse")


def _allele_count_and_number(column: np.ndarray) -> tuple[float, int]:
    called = column >= 0
    return float(column[called].sum()), 2 * int(called.sum())


def marker_frequency(genotype, marker: int) -> float:
    """
    Allele frequency of one marker over all samples with a called genotype.

    Parameters
    ----------
    genotype : array-like, shape (n_samples, n_markers)
        Genotype dosages; negative values are missing.
    marker : int
        0-based marker column.

    Returns
    -------
    float
        ``allele_count / allele_number``, or 0.0 when every sample is
        missing at the marker.
    """
    geno = as_genotype_matrix(genotype)
    check_marker_index(geno, marker)
    ac, an = _allele_count_and_number(geno[:, marker])
    if an == 0:
        return 0.0
    return ac / an


def marker_frequency_from_controls(
    genotype,
    phenotype,
    marker: int,
    case_value: float = 1.0,
) -> float:
    """
    Continuity-corrected allele frequency of one marker estimated from controls.

    Samples whose phenotype equals ``case_value`` are skipped; every other
    sample with a called genotype contributes. The result is
    ``(allele_count + 1) / (allele_number + 2)`` which is never exactly 0
    or 1 for non-negative dosages, even when no control is informative.

    Parameters
    ----------
    genotype : array-like, shape (n_samples, n_markers)
        Genotype dosages; negative values are missing.
    phenotype : array-like, shape (n_samples,)
        Binary trait; ``case_value`` marks cases.
    marker : int
        0-based marker column.
    case_value : float
        Phenotype value identifying cases. Default: 1.0.

    Returns
    -------
    float
    """
    geno = as_genotype_matrix(genotype)
    check_marker_index(geno, marker)
    pheno = as_phenotype_vector(phenotype, geno.shape[0])
    ac, an = _allele_count_and_number(geno[pheno != case_value, marker])
    return (ac + 1.0) / (an + 2.0)


def marker_frequencies(
    genotype,
    phenotype=None,
    controls_only: bool = False,
    case_value: float = 1.0,
) -> np.ndarray:
    """
    Allele frequency for every marker column.

    Parameters
    ----------
    genotype : array-like, shape (n_samples, n_markers)
    phenotype : array-like or None
        Required when ``controls_only`` is True.
    controls_only : bool
        Use ``marker_frequency_from_controls`` instead of ``marker_frequency``.
    case_value : float
        Phenotype value identifying cases (controls_only mode).

    Returns
    -------
    np.ndarray, shape (n_markers,), float64
    """
    geno = as_genotype_matrix(genotype)
    n_markers = geno.shape[1]
    if controls_only:
        pheno = as_phenotype_vector(phenotype, geno.shape[0])
        return np.array(
            [marker_frequency_from_controls(geno, pheno, m, case_value) for m in range(n_markers)],
            dtype=np.float64,
        )
    return np.array([marker_frequency(geno, m) for m in range(n_markers)], dtype=np.float64)


def group_frequency(freqs: Sequence[float]) -> dict[float, list[int]]:
    """
    Group marker indices by exactly equal allele frequency.

    Parameters
    ----------
    freqs : sequence of float
        Per-marker frequencies, indexed by marker position.

    Returns
    -------
    dict[float, list[int]]
        Keys are the distinct frequencies in ascending order; values are the
        0-based marker indices sharing that frequency, in ascending order.

    Examples
    --------
    >>> group_frequency([0.1, 0.2, 0.1, 0.3])
    {0.1: [0, 2], 0.2: [1], 0.3: [3]}
    """
    groups: dict[float, list[int]] = {}
    for i, f in enumerate(freqs):
        groups.setdefault(float(f), []).append(i)
    grouped = {f: groups[f] for f in sorted(groups)}
    logger.debug(f"Grouped {len(freqs)} marker(s) into {len(grouped)} frequency group(s)")
    return grouped
