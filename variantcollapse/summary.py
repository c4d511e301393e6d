# File: variantcollapse/summary.py
# Location: variantcollapse/variantcollapse/summary.py

"""
Distribution summaries and the summary header block.

Provides:
- ``Summary`` / ``compute_summary``: min, nearest-rank quartiles, max, mean
  and sample standard deviation of a set of observations.
- ``SummaryHeader``: collects labelled summaries of phenotypes and
  covariates and renders them as a ``##``-prefixed text block that is
  written ahead of association results.

Quartiles are read straight from the sorted observations at index
``int(n * p)`` with no interpolation, so for ``[1, 2, 3, 4]`` the median
is 3, not 2.5. Downstream parsers of the header rely on these values.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Tuple

import numpy as np
import pandas as pd
from jinja2 import Environment, FileSystemLoader

from .errors import PreconditionError

logger = logging.getLogger("variantcollapse")

SUMMARY_COLUMNS = ["min", "25th", "median", "75th", "max", "mean", "variance"]

# Header count lines; pedigree structure is not modelled so all equal the sample count.
COUNT_KEYS = [
    "Samples",
    "AnalyzedSamples",
    "Families",
    "AnalyzedFamilies",
    "Founders",
    "AnalyzedFounders",
]


@dataclass(frozen=True)
class Summary:
    """Five-number summary plus mean and sample standard deviation."""

    min: float
    q1: float
    median: float
    q3: float
    max: float
    mean: float
    sd: float
    n: int

    @property
    def variance(self) -> float:
        return self.sd * self.sd


def compute_summary(observations: Sequence[float]) -> Summary:
    """
    Summarize a set of numeric observations.

    Parameters
    ----------
    observations : sequence of float
        At least one value.

    Returns
    -------
    Summary
        ``q1``, ``median`` and ``q3`` are the sorted values at indices
        ``int(n * 0.25)``, ``int(n * 0.5)`` and ``int(n * 0.75)``.
        ``sd`` uses the n - 1 denominator and is 0.0 for a single value.

    Raises
    ------
    PreconditionError
        If ``observations`` is empty.
    """
    values = np.asarray(observations, dtype=np.float64).ravel()
    n = values.shape[0]
    if n == 0:
        raise PreconditionError("Cannot summarize an empty set of observations", "observations")

    t = np.sort(values)
    sd = float(np.std(values, ddof=1)) if n > 1 else 0.0
    return Summary(
        min=float(t[0]),
        q1=float(t[int(n * 0.25)]),
        median=float(t[int(n * 0.5)]),
        q3=float(t[int(n * 0.75)]),
        max=float(t[n - 1]),
        mean=float(values.mean()),
        sd=sd,
        n=n,
    )


def _format_row(label: str, s: Summary) -> List[str]:
    return [label] + [
        "%g" % v for v in (s.min, s.q1, s.median, s.q3, s.max, s.mean, s.variance)
    ]


class SummaryHeader:
    """
    Accumulate phenotype and covariate summaries for the report header.

    Phenotypes and covariates are kept in the order they were recorded.
    The header is meant to be built once per analysis run and rendered
    once; it is not thread-safe.
    """

    def __init__(self) -> None:
        self.phenotypes: List[Tuple[str, Summary]] = []
        self.covariates: List[Tuple[str, Summary]] = []
        self.inverse_normalized = False

    def record_phenotype(self, label: str, values: Sequence[float]) -> Summary:
        """Summarize ``values`` and append it under ``label``."""
        summary = compute_summary(values)
        self.phenotypes.append((label, summary))
        return summary

    def set_inverse_normal(self, flag: bool) -> None:
        self.inverse_normalized = bool(flag)

    def record_covariate_column(self, label: str, values: Sequence[float]) -> Summary:
        """Summarize one covariate column and append it under ``label``."""
        summary = compute_summary(values)
        self.covariates.append((label, summary))
        return summary

    def record_covariate(self, covariates, labels: Optional[Sequence[str]] = None) -> None:
        """
        Replace the recorded covariates with every column of ``covariates``.

        Parameters
        ----------
        covariates : pd.DataFrame or array-like, shape (n_samples, k)
            Covariate matrix. DataFrame column names are used as labels
            unless ``labels`` is given.
        labels : sequence of str, optional
            One label per column. Required for non-DataFrame input.

        Raises
        ------
        PreconditionError
            If labels are missing or do not match the number of columns.
        """
        if isinstance(covariates, pd.DataFrame):
            matrix = covariates.to_numpy(dtype=np.float64)
            if labels is None:
                labels = [str(c) for c in covariates.columns]
        else:
            matrix = np.asarray(covariates, dtype=np.float64)
        if matrix.ndim == 1:
            matrix = matrix.reshape(-1, 1)
        if labels is None or len(labels) != matrix.shape[1]:
            raise PreconditionError(
                f"Expected {matrix.shape[1]} covariate label(s), got "
                f"{'none' if labels is None else len(labels)}",
                "labels",
            )

        self.covariates = []
        for col, label in enumerate(labels):
            self.record_covariate_column(label, matrix[:, col])
        logger.debug(f"Recorded {len(self.covariates)} covariate summaries")

    @property
    def n_samples(self) -> int:
        return self.phenotypes[0][1].n if self.phenotypes else 0

    def render(self) -> str:
        """Render the header block; every line starts with ``##``."""
        templates_dir = Path(__file__).parent / "templates"
        if not templates_dir.exists():
            raise FileNotFoundError(f"Templates directory not found at: {templates_dir}")

        env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        template = env.get_template("summary_header.txt.j2")
        return template.render(
            count_keys=COUNT_KEYS,
            n_samples=self.n_samples,
            inverse_normal=self.inverse_normalized,
            sep="\t",
            columns=SUMMARY_COLUMNS,
            phenotype_rows=[_format_row(label, s) for label, s in self.phenotypes],
            covariate_labels=[label for label, _ in self.covariates],
            covariate_rows=[_format_row(label, s) for label, s in self.covariates],
        )

    def write(self, sink: TextIO) -> None:
        """Write the rendered header to ``sink`` (any object with ``write``)."""
        sink.write(self.render())
