"""Functions to match keys and join tabular data onto spatial data."""

import pandas as pd


def normalise_keys(keys):
    """Strip surrounding whitespace from join keys.

    Parameters
    ----------
    keys : pandas.Series or list
        Key values

    Returns
    -------
    pandas.Series
        Keys as strings without leading or trailing whitespace; missing
        values stay missing

    Notes
    -----
    Case and coding scheme are left untouched; ``"E09000001"`` and
    ``"e09000001"`` remain different keys.
    """
    keys = pd.Series(keys)
    return keys.where(keys.isna(), keys.astype(str).str.strip())


def key_match(keys, reference):
    """Check which key values are present in a reference key column.

    Parameters
    ----------
    keys : pandas.Series or list
        Key values of the table to be joined
    reference : pandas.Series or list
        Key values of the spatial data's attribute table

    Returns
    -------
    pandas.Series
        Boolean series, one value per key, true where the key is present in
        the reference
    """
    keys = pd.Series(keys)
    matched = keys.isin(pd.Series(reference)).rename("matched")
    print(f"Keys matched: {matched.sum():,} of {len(matched):,}")
    if not matched.all():
        print(f"Unmatched keys: {list(keys[~matched])}")
    return matched


def attribute_join(
    gdf, table, left_on, right_on=None, columns=None, how="left"
):
    """Join a table's columns onto a geodataframe's attributes by key.

    Parameters
    ----------
    gdf : geopandas.GeoDataFrame
        Spatial data
    table : pandas.DataFrame
        Tabular data to join
    left_on : str
        Key column of the spatial data
    right_on : str
        Key column of the tabular data; defaults to ``left_on``
    columns : list[str]
        Columns of the tabular data to join; defaults to all of them
    how : str
        Type of merge; ``"left"`` keeps every spatial feature

    Returns
    -------
    geopandas.GeoDataFrame
        Spatial data with the joined columns, in its original row order and
        with its original index and CRS

    Notes
    -----
    Keys must be unique in the tabular data, otherwise polygons would be
    duplicated. Columns already present in the spatial data get the suffix
    ``"_right"``.
    """
    if right_on is None:
        right_on = left_on
    if left_on not in gdf.columns:
        raise ValueError(f"Key column '{left_on}' not in the spatial data")
    if right_on not in table.columns:
        raise ValueError(f"Key column '{right_on}' not in the table")
    duplicated = table[right_on][table[right_on].duplicated()]
    if len(duplicated):
        raise ValueError(
            f"Duplicated keys in '{right_on}': {list(duplicated.unique())}"
        )
    if columns is None:
        columns = list(table.columns)
    right = table[[right_on] + [c for c in columns if c != right_on]]
    # the table's key may share a name with a spatial column
    key = left_on if right_on == left_on else "_key"
    right = right.rename(columns={right_on: key})

    index_name = gdf.index.name
    joined = (
        gdf.reset_index(names="_index")
        .merge(
            right,
            how=how,
            left_on=left_on,
            right_on=key,
            suffixes=("", "_right"),
            indicator=True,
        )
        .set_index("_index")
    )
    joined.index.name = index_name
    n_joined = (joined["_merge"] == "both").sum()
    joined = joined.drop(columns="_merge")
    if key != left_on:
        joined = joined.drop(columns=key)
    print(f"Rows with joined data: {n_joined:,} of {len(joined):,}")
    return joined
