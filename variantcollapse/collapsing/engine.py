# File: variantcollapse/collapsing/engine.py
# Location: variantcollapse/variantcollapse/collapsing/engine.py
"""
CollapsingEngine: method dispatch for the collapsing transforms.

Maps a method name from ``CollapsingConfig`` to the matching transform in
``methods.py`` and applies it, plus a frequency-grouped CMC that produces
one indicator column per set of markers sharing the same allele frequency.

Method names
------------
``"cmc"``                       ``cmc_collapse``
``"zeggini"``                   ``zeggini_collapse``
``"madsen_browning"``           ``madsen_browning_collapse``
``"madsen_browning_controls"``  ``madsen_browning_collapse_controls`` (needs phenotype)
``"fp"``                        ``fp_collapse``
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from variantcollapse.collapsing.frequency import group_frequency, marker_frequencies
from variantcollapse.collapsing.matrix import as_genotype_matrix, new_output_matrix
from variantcollapse.collapsing.methods import (
    cmc_collapse,
    cmc_collapse_indexed,
    fp_collapse,
    madsen_browning_collapse,
    madsen_browning_collapse_controls,
    zeggini_collapse,
)
from variantcollapse.config import CollapsingConfig
from variantcollapse.errors import PreconditionError

logger = logging.getLogger("variantcollapse")

COLLAPSERS: dict[str, Callable[..., np.ndarray]] = {
    "cmc": cmc_collapse,
    "zeggini": zeggini_collapse,
    "madsen_browning": madsen_browning_collapse,
    "madsen_browning_controls": madsen_browning_collapse_controls,
    "fp": fp_collapse,
}

PHENOTYPE_METHODS = frozenset({"madsen_browning_controls"})


def get_collapser(method: str) -> Callable[..., np.ndarray]:
    """
    Return the collapsing function registered under ``method``.

    Raises
    ------
    ValueError
        If ``method`` is not a known collapsing method.
    """
    try:
        return COLLAPSERS[method]
    except KeyError:
        raise ValueError(
            f"Unknown collapsing method '{method}'. Supported methods: "
            f"{', '.join(repr(m) for m in COLLAPSERS)}."
        ) from None


class CollapsingEngine:
    """
    Apply the configured collapsing method to per-unit genotype matrices.

    The engine is stateless apart from its configuration; it can be reused
    for every collapsing unit (gene, region) of an analysis.

    Parameters
    ----------
    config : CollapsingConfig or None
        Run configuration. ``None`` uses the defaults.
    """

    def __init__(self, config: CollapsingConfig | None = None) -> None:
        self.config = config or CollapsingConfig()
        self._collapser = get_collapser(self.config.method)
        logger.debug(f"CollapsingEngine using method '{self.config.method}'")

    @property
    def needs_phenotype(self) -> bool:
        return self.config.method in PHENOTYPE_METHODS

    def collapse(self, genotype, phenotype=None) -> np.ndarray:
        """
        Collapse one unit's genotype matrix.

        Parameters
        ----------
        genotype : array-like, shape (n_samples, n_markers)
        phenotype : array-like or None
            Required by phenotype-aware methods, ignored otherwise.

        Returns
        -------
        np.ndarray, shape (n_samples, 1)
        """
        if self.needs_phenotype:
            if phenotype is None:
                raise PreconditionError(
                    f"Method '{self.config.method}' requires a phenotype vector", "phenotype"
                )
            return self._collapser(genotype, phenotype, case_value=self.config.case_value)
        return self._collapser(genotype)


def collapse_by_frequency_group(
    genotype,
    phenotype=None,
    controls_only: bool = False,
    case_value: float = 1.0,
) -> tuple[np.ndarray, list[float]]:
    """
    CMC-collapse each group of markers that share an allele frequency.

    Parameters
    ----------
    genotype : array-like, shape (n_samples, n_markers)
    phenotype : array-like or None
        Required when ``controls_only`` is True.
    controls_only : bool
        Estimate frequencies from controls instead of all samples.
    case_value : float
        Phenotype value identifying cases.

    Returns
    -------
    out : np.ndarray, shape (n_samples, n_groups)
        Column ``j`` is the CMC indicator over the markers of group ``j``.
    group_freqs : list[float]
        Frequency of each output column, ascending.
    """
    geno = as_genotype_matrix(genotype)
    freqs = marker_frequencies(geno, phenotype, controls_only=controls_only, case_value=case_value)
    groups = group_frequency(freqs)

    out = new_output_matrix(geno.shape[0], len(groups))
    for col, markers in enumerate(groups.values()):
        cmc_collapse_indexed(geno, markers, out, col)
    return out, list(groups)
