"""Flatten polygon geometries into a row-per-vertex table.

The output layout follows the ``fortify`` convention of R's ggplot2 so that
the table can be drawn by any plotting library that only understands
vertices and groups:

``long``, ``lat``
    Vertex coordinates
``order``
    Vertex position within an id, counted from 1 across all its pieces
``hole``
    True for vertices of an interior ring
``piece``
    Ring number within an id, counted from 1
``id``
    Feature identifier
``group``
    ``"<id>.<piece>"``, one per ring
"""

import numpy as np
import pandas as pd

FORTIFY_COLUMNS = ["long", "lat", "order", "hole", "piece", "id", "group"]


def polygon_rings(geom):
    """Yield the rings of a (multi)polygon with a flag for holes.

    Parameters
    ----------
    geom : shapely.Polygon or shapely.MultiPolygon
        Polygon geometry

    Yields
    ------
    tuple[shapely.LinearRing, bool]
        Ring and whether it is an interior ring
    """
    if geom.geom_type == "Polygon":
        polygons = [geom]
    elif geom.geom_type == "MultiPolygon":
        polygons = list(geom.geoms)
    else:
        raise ValueError(f"Cannot fortify geometry type '{geom.geom_type}'")
    for polygon in polygons:
        yield polygon.exterior, False
        for interior in polygon.interiors:
            yield interior, True


def fortify(gdf, region=None):
    """Convert polygons to a flat table with one row per vertex.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Polygon data
    region : str
        Column used as the feature identifier; the index is used if None

    Returns
    -------
    pandas.DataFrame
        Fortified table with the columns ``FORTIFY_COLUMNS``

    Notes
    -----
    Missing and empty geometries are skipped. Rings keep their closing
    vertex. Rows sharing an identifier continue its piece and order counts.
    """
    ids = gdf.index if region is None else gdf[region]
    pieces = {}
    orders = {}
    frames = []
    for fid, geom in zip(ids, gdf.geometry):
        if geom is None or geom.is_empty:
            continue
        for ring, hole in polygon_rings(geom):
            coords = np.asarray(ring.coords)[:, :2]
            pieces[fid] = pieces.get(fid, 0) + 1
            start = orders.get(fid, 0)
            orders[fid] = start + len(coords)
            frames.append(
                pd.DataFrame(
                    {
                        "long": coords[:, 0],
                        "lat": coords[:, 1],
                        "order": np.arange(start + 1, orders[fid] + 1),
                        "hole": hole,
                        "piece": pieces[fid],
                        "id": fid,
                        "group": f"{fid}.{pieces[fid]}",
                    }
                )
            )
    if not frames:
        return pd.DataFrame(columns=FORTIFY_COLUMNS)
    return pd.concat(frames, ignore_index=True)


def fortify_with_attributes(gdf, region=None, columns=None):
    """Fortify polygons and attach attribute columns to every vertex.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Polygon data with attributes
    region : str
        Column used as the feature identifier; the index is used if None
    columns : list[str]
        Attribute columns to attach; defaults to all non-geometry columns

    Returns
    -------
    pandas.DataFrame
        Fortified table with the attribute columns, in vertex order
    """
    fortified = fortify(gdf, region=region)
    if columns is None:
        columns = [
            c for c in gdf.columns if c not in (gdf.geometry.name, region)
        ]
    attrs = pd.DataFrame(gdf[[c for c in columns if c != region]])
    attrs["id"] = gdf.index if region is None else gdf[region]
    attrs = attrs.drop_duplicates(subset="id")
    # a left merge keeps the vertex order of the fortified table
    return fortified.merge(attrs, on="id", how="left")
