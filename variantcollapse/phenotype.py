# File: variantcollapse/phenotype.py
# Location: variantcollapse/variantcollapse/phenotype.py
"""
Phenotype transforms applied before summary and association.

``inverse_normal_transform`` maps a quantitative trait onto standard normal
quantiles by rank, the transform reported by ``##InverseNormal=ON`` in the
summary header.
"""

from __future__ import annotations

import logging

import numpy as np
from scipy.stats import norm, rankdata

from variantcollapse.errors import PreconditionError

logger = logging.getLogger("variantcollapse")


def inverse_normal_transform(values) -> np.ndarray:
    """
    Rank-based inverse normal transform.

    Parameters
    ----------
    values : array-like, shape (n,)
        Trait values. Tied values receive their average rank.

    Returns
    -------
    np.ndarray, shape (n,), float64
        ``norm.ppf((rank - 0.5) / n)``.

    Raises
    ------
    PreconditionError
        If ``values`` is empty.
    """
    arr = np.asarray(values, dtype=np.float64).ravel()
    n = arr.shape[0]
    if n == 0:
        raise PreconditionError("Cannot transform an empty phenotype", "values")
    ranks = rankdata(arr, method="average")
    return norm.ppf((ranks - 0.5) / n)


def transform_and_record(header, label: str, values, inverse_normal: bool = False) -> np.ndarray:
    """
    Optionally inverse-normal transform a phenotype and record its summary.

    The header's inverse-normal flag is set to ``inverse_normal`` and the
    summary of the (possibly transformed) values is recorded under ``label``.

    Returns
    -------
    np.ndarray
        The values the association step should use.
    """
    arr = np.asarray(values, dtype=np.float64).ravel()
    if inverse_normal:
        logger.info(f"Applying inverse normal transform to phenotype '{label}'")
        arr = inverse_normal_transform(arr)
    header.set_inverse_normal(inverse_normal)
    header.record_phenotype(label, arr)
    return arr
