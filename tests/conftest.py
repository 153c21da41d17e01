"""Shared test data."""

import geopandas as gpd
import pytest
from shapely.geometry import Polygon, box


@pytest.fixture
def boroughs():
    """Four 1 km squares in British National Grid, one with a hole."""
    x0, y0 = 530000, 180000
    squares = [
        box(x0 + i * 1000, y0, x0 + (i + 1) * 1000, y0 + 1000)
        for i in range(4)
    ]
    squares[3] = Polygon(
        squares[3].exterior.coords,
        [
            [
                (x0 + 3250, y0 + 250),
                (x0 + 3250, y0 + 750),
                (x0 + 3750, y0 + 750),
                (x0 + 3750, y0 + 250),
            ]
        ],
    )
    return gpd.GeoDataFrame(
        {
            "GSS_CODE": ["E09000001", "E09000002", "E09000003", "E09000004"],
            "NAME": ["City of London", "Barking", "Barnet", "Bexley"],
            "USUALRES": [7000, 185000, 356000, 232000],
            "HECTARES": [100.0, 100.0, 100.0, 75.0],
        },
        geometry=squares,
        crs=27700,
    )
