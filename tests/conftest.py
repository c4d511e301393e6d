"""Shared pytest fixtures for all test modules."""

import numpy as np
import pandas as pd
import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast, isolated unit tests")
    config.addinivalue_line("markers", "integration: end-to-end collapsing and report tests")


@pytest.fixture
def small_genotype() -> np.ndarray:
    """Three samples by two markers; samples 0 and 1 carry one allele each."""
    return np.array([[0.0, 1.0], [2.0, 0.0], [0.0, 0.0]])


@pytest.fixture
def case_control_data():
    """Single-marker genotype with two cases (rows 0, 3) and two controls."""
    genotype = np.array([[1.0], [0.0], [0.0], [1.0]])
    phenotype = np.array([1.0, 0.0, 0.0, 1.0])
    return genotype, phenotype


@pytest.fixture
def covariate_frame() -> pd.DataFrame:
    """Covariate matrix with labelled columns."""
    return pd.DataFrame({"AGE": [10.0, 20.0, 30.0, 40.0], "SEX": [0.0, 1.0, 1.0, 0.0]})
