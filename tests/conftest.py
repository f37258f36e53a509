"""Shared pytest fixtures for the plot validator test suite."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from tests.samples import build_collection, build_feature


@pytest.fixture()
def make_feature() -> Callable[..., dict[str, Any]]:
    """Factory for plot Features (see ``tests.samples.build_feature``)."""
    return build_feature


@pytest.fixture()
def make_collection() -> Callable[..., dict[str, Any]]:
    """Factory for FeatureCollections (see ``tests.samples.build_collection``)."""
    return build_collection


@pytest.fixture()
def valid_document() -> dict[str, Any]:
    """The canonical single-plot document that passes every rule."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"plot_ID": "A1", "farmer_name": "J. Doe", "area": 1.5},
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]],
                },
            }
        ],
    }
