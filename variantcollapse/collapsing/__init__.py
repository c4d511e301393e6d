# File: variantcollapse/collapsing/__init__.py
# Location: variantcollapse/variantcollapse/collapsing/__init__.py
"""
variantcollapse.collapsing: rare variant collapsing transforms.

Public API
----------
CollapsingEngine                  : Applies the configured method to a genotype matrix
get_collapser                     : Method name -> collapsing function
collapse_by_frequency_group       : One CMC column per exact-frequency marker group
cmc_collapse, cmc_collapse_indexed, zeggini_collapse,
madsen_browning_collapse, madsen_browning_collapse_controls, fp_collapse
marker_frequency, marker_frequency_from_controls, marker_frequencies, group_frequency
"""

from variantcollapse.collapsing.engine import (
    CollapsingEngine,
    collapse_by_frequency_group,
    get_collapser,
)
from variantcollapse.collapsing.frequency import (
    group_frequency,
    marker_frequencies,
    marker_frequency,
    marker_frequency_from_controls,
)
from variantcollapse.collapsing.methods import (
    cmc_collapse,
    cmc_collapse_indexed,
    fp_collapse,
    madsen_browning_collapse,
    madsen_browning_collapse_controls,
    zeggini_collapse,
)

__all__ = [
    "CollapsingEngine",
    "cmc_collapse",
    "cmc_collapse_indexed",
    "collapse_by_frequency_group",
    "fp_collapse",
    "get_collapser",
    "group_frequency",
    "madsen_browning_collapse",
    "madsen_browning_collapse_controls",
    "marker_frequencies",
    "marker_frequency",
    "marker_frequency_from_controls",
    "zeggini_collapse",
]
