"""Utility functions for plotting."""

import branca.colormap as cm
import contextily as cx
import folium
import matplotlib as mpl
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from branca.element import MacroElement
from folium.plugins import Fullscreen, MousePosition
from jinja2 import Template
from matplotlib.collections import PatchCollection
from matplotlib.patches import PathPatch
from matplotlib.path import Path

from lbmap import data as rd

EDGE_STYLE = {"edgecolor": "darkslategrey", "linewidth": 0.4}
MISSING_STYLE = {"color": "lightgrey", "hatch": "///", "label": "No data"}


class BindColormap(MacroElement):
    """Show a layer's colormap only while the layer is on the map.

    Parameters
    ----------
    layer : folium.FeatureGroup
        Layer toggled in the layer control
    colormap : branca.colormap.ColorMap
        Colour bar of the layer

    Notes
    -----
    Adapted from
    https://nbviewer.org/gist/BibMartin/f153aa957ddc5fadc64929abdee9ff2e
    """

    _template = Template(
        """
        {% macro script(this, kwargs) %}
            {% set bar = this.colormap.get_name() ~ ".svg[0][0].style" %}
            {% set initial = "block" if this.layer.show else "none" %}
            {{ bar }}.display = '{{ initial }}';
            {{ this._parent.get_name() }}.on("overlayadd", function (e) {
                if (e.layer == {{ this.layer.get_name() }}) {
                    {{ bar }}.display = "block";
                }
            });
            {{ this._parent.get_name() }}.on("overlayremove", function (e) {
                if (e.layer == {{ this.layer.get_name() }}) {
                    {{ bar }}.display = "none";
                }
            });
        {% endmacro %}
        """
    )

    def __init__(self, layer, colormap):
        super().__init__()
        self._name = "BindColormap"
        self.layer = layer
        self.colormap = colormap


def _map_axes(ax, figsize=(7.5, 7.5)):
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)
    return ax


def _finish_axes(ax, title):
    if title:
        ax.set_title(title)
    ax.tick_params(
        bottom=False, left=False, labelbottom=False, labelleft=False
    )


def plot_boroughs(gdf, ax=None, color="navajowhite", title=None, **kwargs):
    """Plot the outlines of the boroughs.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Borough polygons
    ax : matplotlib.axes.Axes
        Axes to draw on; a new figure is created if None
    color : str
        Fill colour
    title : str
        Plot title
    **kwargs
        Passed on to ``geopandas.GeoDataFrame.plot``

    Returns
    -------
    matplotlib.axes.Axes
        Axes of the plot
    """
    ax = _map_axes(ax)
    style = {**EDGE_STYLE, **kwargs}
    gdf.plot(ax=ax, color=color, **style)
    _finish_axes(ax, title)
    return ax


def plot_shaded(gdf, colors, ax=None, title=None):
    """Plot polygons with one colour per feature.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Borough polygons
    colors : list[str]
        Colours in the row order of ``gdf``, e.g. from
        ``lbmap.functions.shade_by_value``
    ax : matplotlib.axes.Axes
        Axes to draw on; a new figure is created if None
    title : str
        Plot title

    Returns
    -------
    matplotlib.axes.Axes
        Axes of the plot
    """
    ax = _map_axes(ax)
    gdf.plot(ax=ax, color=list(colors), **EDGE_STYLE)
    _finish_axes(ax, title)
    return ax


def plot_choropleth(
    gdf,
    column,
    ax=None,
    cmap="rocket_r",
    scheme=None,
    k=5,
    title=None,
    basemap=False,
    legend_label=None,
):
    """Plot a choropleth map of an attribute.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Borough polygons with attributes
    column : str
        Attribute to shade the polygons by
    ax : matplotlib.axes.Axes
        Axes to draw on; a new figure is created if None
    cmap : str
        Seaborn or Matplotlib palette name
    scheme : str
        Mapclassify classification scheme, e.g. ``"quantiles"``; a continuous
        colour bar is used if None
    k : int
        Number of classes for the classification scheme
    title : str
        Plot title
    basemap : bool
        Add a CartoDB Positron basemap underneath (requires network access)
    legend_label : str
        Legend title; defaults to the column name

    Returns
    -------
    matplotlib.axes.Axes
        Axes of the plot
    """
    ax = _map_axes(ax)
    label = legend_label or column
    if scheme:
        legend_kwds = {"loc": "lower right", "title": label, "fontsize": 8}
        kwargs = {"scheme": scheme, "k": k}
    else:
        legend_kwds = {"label": label, "shrink": 0.6}
        kwargs = {}
    gdf.plot(
        column=column,
        ax=ax,
        cmap=sns.color_palette(cmap, as_cmap=True),
        legend=True,
        legend_kwds=legend_kwds,
        missing_kwds=MISSING_STYLE,
        alpha=0.85 if basemap else 1,
        **EDGE_STYLE,
        **kwargs,
    )
    if basemap:
        cx.add_basemap(ax, crs=gdf.crs, source=cx.providers.CartoDB.Positron)
    _finish_axes(ax, title)
    return ax


def plot_fortified(fortified, column, ax=None, cmap="rocket_r", title=None):
    """Plot a fortified table as filled polygons.

    Parameters
    ----------
    fortified : pandas.DataFrame
        Output of ``lbmap.fortify.fortify_with_attributes``
    column : str
        Attribute to fill the polygons by
    ax : matplotlib.axes.Axes
        Axes to draw on; a new figure is created if None
    cmap : str
        Seaborn or Matplotlib palette name
    title : str
        Plot title

    Returns
    -------
    matplotlib.axes.Axes
        Axes of the plot

    Notes
    -----
    All pieces of an id are drawn as one compound path so that holes are
    left unfilled. Ids without a value are filled light grey.
    """
    ax = _map_axes(ax)
    patches = []
    values = []
    for _, vertices in fortified.groupby("id", sort=False):
        vertices = vertices.sort_values("order")
        paths = [
            Path(piece[["long", "lat"]].to_numpy())
            for _, piece in vertices.groupby("piece", sort=False)
        ]
        patches.append(PathPatch(Path.make_compound_path(*paths)))
        values.append(vertices[column].iloc[0])
    palette = sns.color_palette(cmap, as_cmap=True).with_extremes(
        bad=MISSING_STYLE["color"]
    )
    collection = PatchCollection(patches, cmap=palette, **EDGE_STYLE)
    collection.set_array(np.asarray(values, dtype=float))
    ax.add_collection(collection)
    ax.autoscale_view()
    ax.set_aspect("equal")
    ax.figure.colorbar(collection, ax=ax, label=column, shrink=0.6)
    _finish_axes(ax, title)
    return ax


def plot_party_shares(
    gdf, columns, labels=None, cmap="mako_r", ncols=3, vmin=0, vmax=None
):
    """Plot small multiple choropleths of party shares on a common scale.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Borough polygons with the party share columns
    columns : list[str]
        Party share columns
    labels : list[str]
        Subplot titles; defaults to the column names
    cmap : str
        Seaborn or Matplotlib palette name
    ncols : int
        Number of subplot columns
    vmin : float
        Start of the colour scale
    vmax : float
        End of the colour scale; defaults to the largest share

    Returns
    -------
    matplotlib.figure.Figure
        Figure of the plot
    """
    if labels is None:
        labels = columns
    if vmax is None:
        vmax = gdf[columns].max().max()
    ncols = min(ncols, len(columns))
    nrows = int(np.ceil(len(columns) / ncols))
    fig, axs = plt.subplots(
        nrows, ncols, figsize=(4 * ncols, 4 * nrows), squeeze=False
    )
    palette = sns.color_palette(cmap, as_cmap=True)
    for ax, col, label in zip(axs.flat, columns, labels):
        gdf.plot(
            column=col,
            ax=ax,
            cmap=palette,
            vmin=vmin,
            vmax=vmax,
            missing_kwds=MISSING_STYLE,
            **EDGE_STYLE,
        )
        _finish_axes(ax, label)
    for ax in axs.flat[len(columns):]:
        ax.remove()
    fig.colorbar(
        mpl.cm.ScalarMappable(
            norm=mpl.colors.Normalize(vmin=vmin, vmax=vmax), cmap=palette
        ),
        ax=[ax for ax in axs.flat[: len(columns)]],
        shrink=0.6,
    )
    return fig


def plot_interactive_map(
    gdf,
    columns,
    aliases=None,
    name=rd.BOROUGH_NAME,
    palettes=("rocket_r", "mako_r", "flare", "crest"),
):
    """Plot an interactive choropleth map using Folium.

    Each column becomes a layer with its own colormap; only the colormap of
    a visible layer is displayed.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Borough polygons with attributes
    columns : list[str]
        Attributes to map
    aliases : list[str]
        Layer names and captions; defaults to the column names
    name : str
        Column holding the borough name, shown in the tooltip
    palettes : tuple[str]
        Seaborn palettes, used in turn for each layer

    Returns
    -------
    folium.Map
        Interactive map
    """
    if aliases is None:
        aliases = columns
    gdf_plt = gdf[[name] + columns + ["geometry"]].to_crs(4326)

    minx, miny, maxx, maxy = gdf_plt.total_bounds
    m = folium.Map(
        tiles="cartodbvoyager",
        control_scale=True,
        location=[np.mean((miny, maxy)), np.mean((minx, maxx))],
        zoom_start=10,
    )

    for i, (col, alias) in enumerate(zip(columns, aliases)):
        fg = folium.FeatureGroup(name=alias, show=i == 0)
        colormap = cm.StepColormap(
            list(sns.color_palette(palettes[i % len(palettes)])),
            vmin=gdf_plt[col].min(),
            vmax=gdf_plt[col].max(),
        )
        colormap.caption = alias
        colours = {
            str(key): colormap(value) if pd.notna(value) else "lightgrey"
            for key, value in gdf_plt[col].items()
        }
        layer = gdf_plt[[name, "geometry"]].copy()
        layer["value"] = [
            f"{x:,.2f}" if pd.notna(x) else "No data" for x in gdf_plt[col]
        ]
        folium.GeoJson(
            layer,
            style_function=lambda feature, colours=colours: {
                "fillColor": colours[feature["id"]],
                "color": "darkslategrey",
                "weight": 0.5,
                "fillOpacity": 0.85,
            },
            tooltip=folium.GeoJsonTooltip(
                fields=[name, "value"], aliases=["Borough", alias]
            ),
            smooth_factor=0,
        ).add_to(fg)
        m.add_child(fg)
        m.add_child(colormap)
        m.add_child(BindColormap(fg, colormap))

    folium.LayerControl(collapsed=False).add_to(m)
    MousePosition().add_to(m)
    Fullscreen().add_to(m)

    return m
