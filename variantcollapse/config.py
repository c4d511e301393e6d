# File: variantcollapse/config.py
# Location: variantcollapse/variantcollapse/config.py

"""
Configuration management module.

This module handles loading configuration from a JSON file and turning it
into a ``CollapsingConfig``. All default values reside in config.json, which
is included in the installed package directory.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from typing import Any

logger = logging.getLogger("variantcollapse")


def load_config(config_file: str | None = None) -> dict[str, Any]:
    """
    Load configuration from a JSON file.

    If no config_file is provided, the function loads the 'config.json'
    from the installed package directory.

    Parameters
    ----------
    config_file : str, optional
        Path to a configuration file in JSON format. If None, defaults to
        the package-installed 'config.json'.

    Returns
    -------
    dict
        Configuration dictionary loaded from the JSON file.

    Raises
    ------
    FileNotFoundError
        If the specified configuration file does not exist.
    ValueError
        If there is an error parsing the JSON configuration file.
    """
    if not config_file:
        config_file = os.path.join(os.path.dirname(__file__), "config.json")

    if not os.path.exists(config_file):
        raise FileNotFoundError(f"Configuration file '{config_file}' not found.")

    with open(config_file, "r", encoding="utf-8") as f:
        try:
            config = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error parsing JSON configuration: {e}") from e

    if not isinstance(config, dict):
        raise ValueError(f"Configuration in '{config_file}' must be a JSON object.")

    return config


@dataclass
class CollapsingConfig:
    """
    Configuration for a collapsing run.

    Fields
    ------
    method : str
        Collapsing method name: "cmc", "zeggini", "madsen_browning",
        "madsen_browning_controls" or "fp". Default: "cmc".
    case_value : float
        Phenotype value marking a case. Samples with any other value count
        as controls for the control-only frequency estimator. Default: 1.0.
    inverse_normal : bool
        Apply a rank-based inverse normal transform to the phenotype before it
        is summarized; reported as ``##InverseNormal`` in the summary header.
        Default: False.
    """

    method: str = "cmc"
    case_value: float = 1.0
    inverse_normal: bool = False

    @classmethod
    def from_dict(cls, cfg: dict[str, Any]) -> CollapsingConfig:
        """Build a config from a dict, ignoring (and warning about) unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(cfg) - known)
        if unknown:
            logger.warning(f"Ignoring unknown configuration key(s): {', '.join(unknown)}")
        return cls(**{k: v for k, v in cfg.items() if k in known})
