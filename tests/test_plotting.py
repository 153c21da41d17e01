"""Test ``lbmap.plotting`` functions.

"""

import folium
import matplotlib as mpl
import numpy as np
import pytest

mpl.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from lbmap import fortify as ft  # noqa: E402
from lbmap import functions as fns  # noqa: E402
from lbmap import plotting as lp  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_plot_boroughs(boroughs):
    """Test ``lbmap.plotting.plot_boroughs``"""
    ax = lp.plot_boroughs(boroughs, title="London boroughs")
    assert ax.get_title() == "London boroughs"
    assert len(ax.collections) == 1
    assert len(ax.collections[0].get_paths()) == len(boroughs)

    _, ax2 = plt.subplots()
    assert lp.plot_boroughs(boroughs, ax=ax2, linewidth=2) is ax2


def test_plot_shaded(boroughs):
    """Test ``lbmap.plotting.plot_shaded``"""
    colours = fns.shade_by_value(boroughs["USUALRES"])
    ax = lp.plot_shaded(boroughs, colors=colours)
    facecolors = ax.collections[0].get_facecolors()
    assert len(facecolors) == len(boroughs)
    np.testing.assert_allclose(
        facecolors[2], mpl.colors.to_rgba(colours[2])
    )


def test_plot_choropleth(boroughs):
    """Test ``lbmap.plotting.plot_choropleth``"""
    boroughs["USUALRES"] = [np.nan, 185000, 356000, 232000]
    ax = lp.plot_choropleth(
        boroughs, column="USUALRES", legend_label="Residents", title="Pop."
    )
    assert ax.get_title() == "Pop."
    # colour bar axes
    assert len(ax.figure.axes) == 2

    ax = lp.plot_choropleth(
        boroughs, column="USUALRES", scheme="quantiles", k=2
    )
    legend = ax.get_legend()
    assert legend.get_title().get_text() == "USUALRES"
    assert "No data" in [t.get_text() for t in legend.get_texts()]


def test_plot_fortified(boroughs):
    """Test ``lbmap.plotting.plot_fortified``"""
    fortified = ft.fortify_with_attributes(
        boroughs, region="GSS_CODE", columns=["USUALRES"]
    )
    ax = lp.plot_fortified(fortified, column="USUALRES", title="Fortified")
    collection = ax.collections[0]
    assert len(collection.get_paths()) == len(boroughs)
    np.testing.assert_array_equal(
        collection.get_array(), boroughs["USUALRES"].astype(float)
    )
    # the holed borough keeps both rings in one path
    holed = collection.get_paths()[3]
    assert (holed.codes == mpl.path.Path.MOVETO).sum() == 2
    xmin, xmax = ax.get_xlim()
    assert xmin <= 530000 and xmax >= 534000


def test_plot_fortified_missing(boroughs):
    """Test ``lbmap.plotting.plot_fortified`` with a missing value"""
    boroughs["Anxiety"] = [np.nan, 3.1, 3.5, 3.3]
    fortified = ft.fortify_with_attributes(
        boroughs, region="GSS_CODE", columns=["Anxiety"]
    )
    ax = lp.plot_fortified(fortified, column="Anxiety")
    collection = ax.collections[0]
    collection.update_scalarmappable()
    facecolors = collection.get_facecolor()
    np.testing.assert_allclose(facecolors[0], mpl.colors.to_rgba("lightgrey"))
    assert not np.allclose(facecolors[1], mpl.colors.to_rgba("lightgrey"))


def test_plot_party_shares(boroughs):
    """Test ``lbmap.plotting.plot_party_shares``"""
    boroughs["Con"] = [0.1, 0.2, 0.3, 0.4]
    boroughs["Lab"] = [0.5, 0.6, 0.7, 0.2]
    fig = lp.plot_party_shares(
        boroughs, columns=["Con", "Lab"], labels=["Conservatives", "Labour"]
    )
    titles = [ax.get_title() for ax in fig.axes]
    assert titles[:2] == ["Conservatives", "Labour"]
    # two maps and one colour bar
    assert len(fig.axes) == 3
    # the scale starts at zero and ends at the largest share
    assert fig.axes[0].collections[0].norm.vmin == 0
    assert fig.axes[0].collections[0].norm.vmax == 0.7

    fig = lp.plot_party_shares(
        boroughs, columns=["Con", "Lab", "USUALRES"], ncols=2, vmax=1
    )
    assert len(fig.axes) == 4


def test_plot_interactive_map(boroughs):
    """Test ``lbmap.plotting.plot_interactive_map``"""
    boroughs.loc[1, "HECTARES"] = np.nan
    m = lp.plot_interactive_map(
        boroughs,
        columns=["USUALRES", "HECTARES"],
        aliases=["Usual residents", "Area [ha]"],
    )
    assert isinstance(m, folium.Map)
    groups = [
        c for c in m._children.values() if isinstance(c, folium.FeatureGroup)
    ]
    assert [g.layer_name for g in groups] == ["Usual residents", "Area [ha]"]
    bindings = [
        c for c in m._children.values() if isinstance(c, lp.BindColormap)
    ]
    assert len(bindings) == 2
    html = m.get_root().render()
    assert "Area [ha]" in html
    assert "No data" in html
    # only the first layer starts with its colour bar showing
    assert html.count("style.display = 'none';") == 1
