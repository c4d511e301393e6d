# File: variantcollapse/collapsing/methods.py
# Location: variantcollapse/variantcollapse/collapsing/methods.py
"""
Collapsing transforms for rare variant burden analysis.

Each transform maps a ``(n_samples, n_markers)`` genotype matrix to an
aggregate ``(n_samples, 1)`` float64 matrix:

- ``cmc_collapse``: CMC indicator, 1.0 if the sample carries any
  non-reference call, else 0.0.
- ``cmc_collapse_indexed``: CMC indicator over a subset of markers, written
  into one column of a caller-owned wider matrix.
- ``zeggini_collapse``: Morris-Zeggini count of markers with a
  non-reference call.
- ``madsen_browning_collapse_controls``: Madsen-Browning weighted sum with
  weights ``1 / sqrt(f (1 - f) n)`` and ``f`` estimated from controls.
- ``madsen_browning_collapse``: Weighted sum with ``1 / sqrt(f (1 - f))``
  and ``f`` estimated from all samples.
- ``fp_collapse``: Same formula as ``madsen_browning_collapse``, kept as a
  separate entry point for the frequency-weighted ("fp") burden.

Missing genotypes (negative or NaN) never contribute. A non-reference call
is a dosage that is still positive after truncation toward zero, so an
imputed dosage of 0.7 does not count for CMC or Morris-Zeggini but does
count, at its fractional value, in the weighted sums.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from variantcollapse.collapsing.frequency import marker_frequencies
from variantcollapse.collapsing.matrix import (
    as_genotype_matrix,
    as_phenotype_vector,
    carrier_mask,
    new_output_matrix,
    observed_dosages,
)
from variantcollapse.errors import PreconditionError

logger = logging.getLogger("variantcollapse")


def cmc_collapse(genotype) -> np.ndarray:
    """
    Collapse markers to a carrier indicator (CMC).

    Parameters
    ----------
    genotype : array-like, shape (n_samples, n_markers)

    Returns
    -------
    np.ndarray, shape (n_samples, 1)
        1.0 where the sample has at least one non-reference call, else 0.0.
    """
    geno = as_genotype_matrix(genotype)
    out = new_output_matrix(geno.shape[0])
    out[carrier_mask(geno).any(axis=1), 0] = 1.0
    return out


def cmc_collapse_indexed(
    genotype,
    index: Sequence[int],
    out: np.ndarray,
    out_index: int,
) -> np.ndarray:
    """
    Collapse a subset of markers into one column of an existing matrix.

    Only ``out[:, out_index]`` is touched, and only by setting carriers to
    1.0; the column is not reset and all other columns keep their contents.
    Calls on distinct ``out_index`` values are independent.

    Parameters
    ----------
    genotype : array-like, shape (n_samples, n_markers)
    index : sequence of int
        Marker columns forming the group.
    out : np.ndarray, shape (n_samples, k)
        Caller-owned aggregate matrix, modified in place.
    out_index : int
        Column of ``out`` to write. Must be < k.

    Returns
    -------
    np.ndarray
        ``out``, for chaining.

    Raises
    ------
    PreconditionError
        If ``out`` is None, has the wrong number of rows, is too narrow for
        ``out_index``, or ``index`` refers to a marker that does not exist.
    """
    geno = as_genotype_matrix(genotype)
    n_samples, n_markers = geno.shape
    if out is None:
        raise PreconditionError("An output matrix is required", "out")
    if out.ndim != 2 or out.shape[0] != n_samples:
        raise PreconditionError(
            f"Output matrix must have {n_samples} rows, got shape {out.shape}", "out"
        )
    if not 0 <= out_index < out.shape[1]:
        raise PreconditionError(
            f"Output column {out_index} out of range for {out.shape[1]} column(s)", "out_index"
        )

    cols = np.asarray(index, dtype=np.intp)
    if cols.size == 0:
        return out
    if cols.min() < 0 or cols.max() >= n_markers:
        raise PreconditionError(
            f"Marker indices must lie in [0, {n_markers}), got {list(index)}", "index"
        )

    out[carrier_mask(geno[:, cols]).any(axis=1), out_index] = 1.0
    return out


def zeggini_collapse(genotype) -> np.ndarray:
    """
    Morris-Zeggini collapsing: count of markers with a non-reference call.

    Returns
    -------
    np.ndarray, shape (n_samples, 1)
    """
    geno = as_genotype_matrix(genotype)
    out = new_output_matrix(geno.shape[0])
    out[:, 0] = carrier_mask(geno).sum(axis=1)
    return out


def _weighted_sum(geno: np.ndarray, freqs: np.ndarray, scale: float) -> np.ndarray:
    out = new_output_matrix(geno.shape[0])
    usable = (freqs > 0.0) & (freqs < 1.0)
    n_skipped = int((~usable).sum())
    if n_skipped:
        logger.debug(
            f"Skipping {n_skipped} of {len(freqs)} marker(s) with frequency at 0 or 1"
        )
    if not usable.any():
        return out

    f = freqs[usable]
    weights = 1.0 / np.sqrt(f * (1.0 - f) * scale)
    out[:, 0] = observed_dosages(geno[:, usable]) @ weights
    return out


def madsen_browning_collapse_controls(genotype, phenotype, case_value: float = 1.0) -> np.ndarray:
    """
    Madsen-Browning weighted sum with frequencies estimated from controls.

    Each marker's weight is ``1 / sqrt(f * (1 - f) * n_samples)`` where ``f``
    is the continuity-corrected control frequency. Markers with ``f <= 0``
    or ``f >= 1`` are skipped.

    Parameters
    ----------
    genotype : array-like, shape (n_samples, n_markers)
    phenotype : array-like, shape (n_samples,)
        Binary trait; ``case_value`` marks cases.
    case_value : float
        Phenotype value identifying cases. Default: 1.0.

    Returns
    -------
    np.ndarray, shape (n_samples, 1)
    """
    geno = as_genotype_matrix(genotype)
    pheno = as_phenotype_vector(phenotype, geno.shape[0])
    freqs = marker_frequencies(geno, pheno, controls_only=True, case_value=case_value)
    return _weighted_sum(geno, freqs, float(geno.shape[0]))


def madsen_browning_collapse(genotype) -> np.ndarray:
    """
    Madsen-Browning weighted sum with frequencies from all samples.

    Weight is ``1 / sqrt(f * (1 - f))`` without the sample-size factor;
    markers with ``f <= 0`` or ``f >= 1`` are skipped. No phenotype needed.
    """
    geno = as_genotype_matrix(genotype)
    return _weighted_sum(geno, marker_frequencies(geno), 1.0)


def fp_collapse(genotype) -> np.ndarray:
    """Frequency-weighted ("fp") collapsing; numerically ``madsen_browning_collapse``."""
    geno = as_genotype_matrix(genotype)
    return _weighted_sum(geno, marker_frequencies(geno), 1.0)
