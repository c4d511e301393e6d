# File: variantcollapse/collapsing/matrix.py
# Location: variantcollapse/variantcollapse/collapsing/matrix.py
"""
Input coercion and shape checks for genotype and phenotype arrays.

Genotype matrices are ``(n_samples, n_markers)`` float64 arrays in which a
negative value (or NaN) marks a missing call. Inputs are never modified;
helpers return float64 views or copies as numpy sees fit.
"""

from __future__ import annotations

import numpy as np

from variantcollapse.errors import PreconditionError


def as_genotype_matrix(genotype) -> np.ndarray:
    """
    Coerce an array-like genotype input to a 2-D float64 array.

    Parameters
    ----------
    genotype : array-like, shape (n_samples, n_markers)
        Genotype dosages. ``pandas.DataFrame`` inputs are accepted.

    Returns
    -------
    np.ndarray, shape (n_samples, n_markers), float64

    Raises
    ------
    PreconditionError
        If the input is not two-dimensional.
    """
    geno = np.asarray(genotype, dtype=np.float64)
    if geno.ndim != 2:
        raise PreconditionError(
            f"Genotype matrix must be 2-D (samples x markers), got {geno.ndim}-D input",
            "genotype",
        )
    return geno


def as_phenotype_vector(phenotype, n_samples: int) -> np.ndarray:
    """Coerce a phenotype to a 1-D float64 array of length ``n_samples``."""
    if phenotype is None:
        raise PreconditionError("A phenotype vector is required", "phenotype")
    pheno = np.asarray(phenotype, dtype=np.float64).ravel()
    if pheno.shape[0] != n_samples:
        raise PreconditionError(
            f"Phenotype length {pheno.shape[0]} does not match {n_samples} samples",
            "phenotype",
        )
    return pheno


def check_marker_index(geno: np.ndarray, marker: int) -> None:
    """Raise ``PreconditionError`` unless ``marker`` addresses a column of ``geno``."""
    n_markers = geno.shape[1]
    if not 0 <= marker < n_markers:
        raise PreconditionError(
            f"Marker index {marker} out of range for {n_markers} marker(s)", "marker"
        )


def new_output_matrix(n_samples: int, n_columns: int = 1) -> np.ndarray:
    """Allocate a zeroed ``(n_samples, n_columns)`` aggregate matrix."""
    return np.zeros((n_samples, n_columns), dtype=np.float64)


def carrier_mask(geno: np.ndarray) -> np.ndarray:
    """
    Boolean mask of non-reference calls.

    A call counts when its dosage truncated toward zero is positive, so
    fractional dosages below 1 and missing values never count.
    """
    return np.trunc(np.nan_to_num(geno, nan=-1.0)) > 0


def observed_dosages(geno: np.ndarray) -> np.ndarray:
    """Copy of ``geno`` with missing calls (negative or NaN) replaced by 0."""
    return np.where(geno >= 0, geno, 0.0)
