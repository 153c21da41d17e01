"""Functions to derive attributes and colour features by them."""

import matplotlib as mpl
import numpy as np
import pandas as pd


def population_density(gdf, population="USUALRES", area="HECTARES"):
    """Population per unit area.

    Parameters
    ----------
    gdf : pandas.DataFrame
        Data containing the population and area columns
    population : str
        Population column
    area : str
        Area column

    Returns
    -------
    pandas.Series
        Population density; NaN where the area is zero
    """
    return (gdf[population] / gdf[area].replace(0, np.nan)).rename("POPDEN")


def shade_by_value(values, cmap="Greys", vmin=None, vmax=None):
    """Map numeric values to colours.

    Parameters
    ----------
    values : pandas.Series or list
        Numeric values, e.g. population
    cmap : str
        Name of a Matplotlib colormap
    vmin : float
        Value mapped to the start of the colormap; defaults to 0
    vmax : float
        Value mapped to the end of the colormap; defaults to the maximum

    Returns
    -------
    list[str]
        Hex colour strings; ``"none"`` for missing values

    Examples
    --------
    >>> shade_by_value([0, 5, 10])[-1]
    '#000000'
    """
    values = pd.Series(values, dtype=float)
    if vmin is None:
        vmin = 0
    if vmax is None:
        vmax = values.max()
    norm = mpl.colors.Normalize(vmin=vmin, vmax=vmax)
    colormap = mpl.colormaps[cmap]
    return [
        "none" if np.isnan(v) else mpl.colors.to_hex(colormap(norm(v)))
        for v in values
    ]


def highlight(gdf, mask, color="red", other="lightgrey"):
    """Colour features depending on a boolean mask.

    A Series mask must share the index of ``gdf``; other masks are taken in
    row order.
    """
    if isinstance(mask, pd.Series) and not mask.index.equals(gdf.index):
        raise ValueError("Mask index does not match the spatial data")
    mask = np.asarray(mask, dtype=bool)
    if len(mask) != len(gdf):
        raise ValueError(
            f"Mask has {len(mask)} values for {len(gdf)} features"
        )
    return [color if m else other for m in mask]


def select_by_threshold(gdf, column, threshold, above=True):
    """Select features by comparing a column with a threshold.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Spatial data
    column : str
        Column to compare
    threshold : float
        Threshold value
    above : bool
        Select values strictly above the threshold if true, otherwise values
        at or below it

    Returns
    -------
    geopandas.GeoDataFrame
        Selected features
    """
    if above:
        return gdf[gdf[column] > threshold]
    return gdf[gdf[column] <= threshold]
