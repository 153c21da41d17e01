"""Test ``lbmap.fortify`` functions.

"""

import geopandas as gpd
import pandas as pd
import pytest
from pandas.testing import assert_frame_equal
from shapely.geometry import MultiPolygon, Point, Polygon, box

from lbmap import fortify as ft


def test_polygon_rings():
    """Test ``lbmap.fortify.polygon_rings``"""
    polygon = Polygon(
        [(0, 0), (0, 4), (4, 4), (4, 0)], [[(1, 1), (1, 2), (2, 2), (2, 1)]]
    )
    rings = list(ft.polygon_rings(MultiPolygon([polygon, box(5, 5, 6, 6)])))
    assert [hole for _, hole in rings] == [False, True, False]
    assert rings[1][0].equals(polygon.interiors[0])
    with pytest.raises(ValueError, match="Point"):
        list(ft.polygon_rings(Point(0, 0)))


def test_fortify_polygon():
    """Test ``lbmap.fortify.fortify`` with a single polygon"""
    gdf = gpd.GeoDataFrame(
        {"code": ["a"]}, geometry=[Polygon([(0, 0), (0, 1), (1, 1), (1, 0)])]
    )
    fortified = ft.fortify(gdf, region="code")
    expected = pd.DataFrame(
        {
            "long": [0.0, 0.0, 1.0, 1.0, 0.0],
            "lat": [0.0, 1.0, 1.0, 0.0, 0.0],
            "order": [1, 2, 3, 4, 5],
            "hole": [False] * 5,
            "piece": [1] * 5,
            "id": ["a"] * 5,
            "group": ["a.1"] * 5,
        }
    )
    assert_frame_equal(fortified, expected, check_dtype=False)


def test_fortify_holes_and_parts(boroughs):
    """Test ``lbmap.fortify.fortify`` with holes and multipolygons"""
    geoms = list(boroughs.geometry)
    geoms[0] = MultiPolygon([box(0, 0, 1, 1), box(2, 2, 3, 3)])
    boroughs = boroughs.set_geometry(gpd.GeoSeries(geoms, crs=boroughs.crs))
    fortified = ft.fortify(boroughs, region="GSS_CODE")
    assert list(fortified.columns) == ft.FORTIFY_COLUMNS
    assert len(fortified) == 5 * 2 + 5 * 2 + 5 * 2
    assert list(fortified["id"].unique()) == list(boroughs["GSS_CODE"])

    multi = fortified[fortified["id"] == "E09000001"]
    assert list(multi["piece"]) == [1] * 5 + [2] * 5
    assert list(multi["order"]) == list(range(1, 11))
    assert not multi["hole"].any()

    holed = fortified[fortified["id"] == "E09000004"]
    assert list(holed["group"].unique()) == ["E09000004.1", "E09000004.2"]
    assert list(holed["hole"]) == [False] * 5 + [True] * 5
    assert list(holed["order"]) == list(range(1, 11))
    # rings are closed
    for _, ring in holed.groupby("piece"):
        assert ring.iloc[0][["long", "lat"]].equals(
            ring.iloc[-1][["long", "lat"]]
        )


def test_fortify_index_and_empty():
    """Test ``lbmap.fortify.fortify`` without a region column"""
    gdf = gpd.GeoDataFrame(
        geometry=[box(0, 0, 1, 1), Polygon(), None, box(1, 1, 2, 2)],
        index=[7, 8, 9, 10],
    )
    fortified = ft.fortify(gdf)
    assert list(fortified["id"].unique()) == [7, 10]
    assert list(fortified["group"].unique()) == ["7.1", "10.1"]

    empty = ft.fortify(gdf.iloc[1:3])
    assert empty.empty
    assert list(empty.columns) == ft.FORTIFY_COLUMNS


def test_fortify_with_attributes(boroughs):
    """Test ``lbmap.fortify.fortify_with_attributes``"""
    fortified = ft.fortify_with_attributes(
        boroughs, region="GSS_CODE", columns=["NAME", "USUALRES"]
    )
    plain = ft.fortify(boroughs, region="GSS_CODE")
    assert_frame_equal(fortified[ft.FORTIFY_COLUMNS], plain)
    assert list(fortified.columns) == ft.FORTIFY_COLUMNS + [
        "NAME",
        "USUALRES",
    ]
    for code, name, pop in zip(
        boroughs["GSS_CODE"], boroughs["NAME"], boroughs["USUALRES"]
    ):
        rows = fortified[fortified["id"] == code]
        assert (rows["NAME"] == name).all()
        assert (rows["USUALRES"] == pop).all()

    fortified = ft.fortify_with_attributes(boroughs)
    assert "GSS_CODE" in fortified.columns
    assert "geometry" not in fortified.columns
    assert list(fortified["id"].unique()) == [0, 1, 2, 3]
