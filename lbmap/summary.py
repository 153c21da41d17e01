"""Functions to inspect spatial data and its attribute table."""

import pandas as pd
import shapely

from lbmap import fortify as ft


def bounding_box(gdf):
    """Bounding box of the spatial data.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Spatial data

    Returns
    -------
    pandas.DataFrame
        Rows ``x`` and ``y``, columns ``min`` and ``max``
    """
    minx, miny, maxx, maxy = gdf.total_bounds
    return pd.DataFrame(
        [[minx, maxx], [miny, maxy]], index=["x", "y"], columns=["min", "max"]
    )


def summary(gdf):
    """Print and return a summary of the spatial data.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Spatial data

    Returns
    -------
    dict
        Dictionary containing the following:
        ``"type"``: class name of the object;
        ``"crs"``: coordinate reference system;
        ``"bbox"``: bounding box, see ``bounding_box``;
        ``"n_features"``: number of features;
        ``"geometry_types"``: counts of each geometry type;
        ``"attributes"``: descriptive statistics of the attribute table
    """
    attrs = pd.DataFrame(gdf.drop(columns=gdf.geometry.name))
    if len(attrs.columns):
        attributes = attrs.describe(include="all")
    else:
        attributes = pd.DataFrame()
    info = {
        "type": type(gdf).__name__,
        "crs": gdf.crs,
        "bbox": bounding_box(gdf),
        "n_features": len(gdf),
        "geometry_types": gdf.geom_type.value_counts(),
        "attributes": attributes,
    }
    print(f"Object of class {info['type']}")
    print(f"Coordinates:\n{info['bbox']}")
    print(f"CRS: {gdf.crs.to_string() if gdf.crs else None}")
    print(f"Number of features: {info['n_features']:,}")
    print(f"Geometry types: {dict(info['geometry_types'])}")
    print(f"Data attributes:\n{attributes}")
    return info


def structure(gdf, n=3):
    """Print and return the structure of the spatial data's columns.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Spatial data
    n : int
        Number of leading values to show for each column

    Returns
    -------
    pandas.DataFrame
        One row per column with its data type, number of non-null values and
        first values; geometries are shown by their type
    """
    rows = {}
    for c in gdf.columns:
        if c == gdf.geometry.name:
            values = gdf[c].geom_type
        else:
            values = gdf[c]
        rows[c] = {
            "dtype": str(gdf[c].dtype),
            "non_null": int(gdf[c].notna().sum()),
            "head": ", ".join(str(x) for x in values.head(n)),
        }
    struct = pd.DataFrame.from_dict(rows, orient="index")
    print(
        f"{type(gdf).__name__}: {len(gdf):,} obs. of "
        f"{len(gdf.columns):,} variables"
    )
    print(struct)
    return struct


def geometry_overview(gdf):
    """Describe each feature's geometry.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Polygon data

    Returns
    -------
    pandas.DataFrame
        One row per feature with the geometry type, number of polygon parts,
        number of holes, number of vertices and plotting order

    Notes
    -----
    The plotting order draws larger features first so that smaller ones are
    not hidden beneath them. Features without a geometry come last.
    """
    geoms = gdf.geometry.to_numpy()
    holes = [
        sum(hole for _, hole in ft.polygon_rings(g)) if g is not None else 0
        for g in geoms
    ]
    overview = pd.DataFrame(
        {
            "geometry_type": gdf.geom_type,
            "parts": shapely.get_num_geometries(geoms),
            "holes": holes,
            "vertices": shapely.get_num_coordinates(geoms),
            "plot_order": gdf.area.rank(
                ascending=False, method="first", na_option="bottom"
            ),
        },
        index=gdf.index,
    )
    overview["plot_order"] = overview["plot_order"].astype(int)
    return overview
