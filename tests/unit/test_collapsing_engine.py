"""
Unit tests for CollapsingEngine dispatch and frequency-grouped CMC.
"""

from __future__ import annotations

import numpy as np
import pytest

from variantcollapse.collapsing.engine import (
    CollapsingEngine,
    collapse_by_frequency_group,
    get_collapser,
)
from variantcollapse.collapsing.methods import (
    cmc_collapse,
    madsen_browning_collapse_controls,
    zeggini_collapse,
)
from variantcollapse.config import CollapsingConfig
from variantcollapse.errors import PreconditionError

# ---------------------------------------------------------------------------
# get_collapser
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestGetCollapser:
    def test_known_methods(self) -> None:
        assert get_collapser("cmc") is cmc_collapse
        assert get_collapser("zeggini") is zeggini_collapse
        assert get_collapser("madsen_browning_controls") is madsen_browning_collapse_controls

    def test_unknown_method_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown collapsing method 'cast'"):
            get_collapser("cast")


# ---------------------------------------------------------------------------
# CollapsingEngine
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestCollapsingEngine:
    def test_default_is_cmc(self, small_genotype) -> None:
        engine = CollapsingEngine()
        assert engine.config.method == "cmc"
        np.testing.assert_array_equal(engine.collapse(small_genotype)[:, 0], [1.0, 1.0, 0.0])

    def test_zeggini_method(self) -> None:
        engine = CollapsingEngine(CollapsingConfig(method="zeggini"))
        geno = np.array([[1.0, 1.0], [0.0, 2.0]])
        np.testing.assert_array_equal(engine.collapse(geno)[:, 0], [2.0, 1.0])

    def test_phenotype_ignored_for_unconditional_methods(self, small_genotype) -> None:
        engine = CollapsingEngine(CollapsingConfig(method="fp"))
        np.testing.assert_array_equal(
            engine.collapse(small_genotype, phenotype=[1.0, 0.0, 0.0]),
            engine.collapse(small_genotype),
        )

    def test_controls_method_needs_phenotype(self, small_genotype) -> None:
        engine = CollapsingEngine(CollapsingConfig(method="madsen_browning_controls"))
        assert engine.needs_phenotype
        with pytest.raises(PreconditionError, match="requires a phenotype"):
            engine.collapse(small_genotype)

    def test_controls_method_uses_case_value(self, case_control_data) -> None:
        geno, pheno = case_control_data
        recoded = np.where(pheno == 1.0, 2.0, 0.0)
        engine = CollapsingEngine(
            CollapsingConfig(method="madsen_browning_controls", case_value=2.0)
        )
        np.testing.assert_allclose(
            engine.collapse(geno, recoded), madsen_browning_collapse_controls(geno, pheno)
        )

    def test_invalid_method_fails_at_construction(self) -> None:
        with pytest.raises(ValueError):
            CollapsingEngine(CollapsingConfig(method="progressive_cmc"))


# ---------------------------------------------------------------------------
# collapse_by_frequency_group
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestCollapseByFrequencyGroup:
    def test_one_column_per_frequency(self) -> None:
        """Markers 0 and 1 share f = 1/8; marker 2 has f = 3/8."""
        geno = np.array(
            [
                [1.0, 0.0, 2.0],
                [0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0],
                [0.0, 0.0, 1.0],
            ]
        )
        out, freqs = collapse_by_frequency_group(geno)
        assert freqs == [0.125, 0.375]
        np.testing.assert_array_equal(
            out, [[1.0, 1.0], [1.0, 0.0], [0.0, 0.0], [0.0, 1.0]]
        )

    def test_controls_only_frequencies(self, case_control_data) -> None:
        geno, pheno = case_control_data
        out, freqs = collapse_by_frequency_group(geno, pheno, controls_only=True)
        assert freqs == pytest.approx([1.0 / 6.0])
        np.testing.assert_array_equal(out[:, 0], [1.0, 0.0, 0.0, 1.0])

    def test_no_markers(self) -> None:
        out, freqs = collapse_by_frequency_group(np.zeros((3, 0)))
        assert out.shape == (3, 0)
        assert freqs == []
