"""
Unit tests for variantcollapse.phenotype.
"""

from __future__ import annotations

import numpy as np
import pytest
from scipy.stats import norm

from variantcollapse.errors import PreconditionError
from variantcollapse.phenotype import inverse_normal_transform, transform_and_record
from variantcollapse.summary import SummaryHeader


@pytest.mark.unit
class TestInverseNormalTransform:
    def test_rank_quantiles(self) -> None:
        """Ranks [3, 1, 2] map to quantiles (r - 0.5) / 3."""
        out = inverse_normal_transform([30.0, 10.0, 20.0])
        np.testing.assert_allclose(out, norm.ppf([5 / 6, 1 / 6, 3 / 6]))

    def test_symmetric_around_zero(self) -> None:
        out = inverse_normal_transform(np.arange(10.0))
        assert out.sum() == pytest.approx(0.0, abs=1e-12)

    def test_ties_share_value(self) -> None:
        out = inverse_normal_transform([1.0, 2.0, 2.0, 3.0])
        assert out[1] == out[2]

    def test_preserves_order(self) -> None:
        values = np.array([2.5, -1.0, 100.0, 0.3])
        out = inverse_normal_transform(values)
        np.testing.assert_array_equal(np.argsort(out), np.argsort(values))

    def test_empty_raises(self) -> None:
        with pytest.raises(PreconditionError):
            inverse_normal_transform([])


@pytest.mark.unit
class TestTransformAndRecord:
    def test_transform_sets_flag_and_records(self) -> None:
        header = SummaryHeader()
        out = transform_and_record(header, "LDL", [5.0, 1.0, 3.0], inverse_normal=True)
        assert header.inverse_normalized is True
        label, summary = header.phenotypes[0]
        assert label == "LDL"
        assert summary.median == pytest.approx(0.0)
        np.testing.assert_allclose(out, inverse_normal_transform([5.0, 1.0, 3.0]))

    def test_no_transform(self) -> None:
        header = SummaryHeader()
        out = transform_and_record(header, "LDL", [5.0, 1.0, 3.0])
        assert header.inverse_normalized is False
        np.testing.assert_array_equal(out, [5.0, 1.0, 3.0])
        assert header.phenotypes[0][1].median == 3.0
