# File: variantcollapse/__init__.py
# Location: variantcollapse/variantcollapse/__init__.py
"""
variantcollapse: rare variant collapsing and phenotype/covariate summaries.

Public API
----------
CollapsingEngine  : Applies a configured collapsing method to a genotype matrix
CollapsingConfig  : Run configuration (method, case value, inverse-normal flag)
SummaryHeader     : Collects phenotype/covariate summaries and renders the ## header
compute_summary   : Nearest-rank five-number summary, mean and sample SD
load_config       : JSON configuration loader
"""

from variantcollapse.collapsing import CollapsingEngine
from variantcollapse.config import CollapsingConfig, load_config
from variantcollapse.summary import Summary, SummaryHeader, compute_summary
from variantcollapse.version import __version__

__all__ = [
    "CollapsingConfig",
    "CollapsingEngine",
    "Summary",
    "SummaryHeader",
    "__version__",
    "compute_summary",
    "load_config",
]
