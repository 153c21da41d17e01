"""Functions to download and read data.

"""

import glob
import os
from datetime import datetime, timezone
from zipfile import ZipFile

import geopandas as gpd
import pandas as pd
import pooch

from lbmap import join

# British National Grid, the CRS of the London Datastore boundaries
CRS = 27700

BOUNDARIES_URL = (
    "https://data.london.gov.uk/download/"
    "statistical-gis-boundary-files-london/"
    "9ba8c833-6370-4b11-abdc-314aa020d5e0/"
    "statistical-gis-boundaries-london.zip"
)
BOUNDARIES_FILE_NAME = "statistical-gis-boundaries-london.zip"

PROFILES_URL = (
    "https://data.london.gov.uk/download/london-borough-profiles/"
    "80647ce7-14f3-4e31-b1cd-d5f7ea3553be/london-borough-profiles.csv"
)
PROFILES_FILE_NAME = "london-borough-profiles.csv"

DATA_DIR = os.path.join("data", "london")

# 2011 census MSOA layer; carries resident and household counts
MSOA_SHAPEFILE = "MSOA_2011_London_gen_MHW.shp"
MSOA_COUNTS = ["USUALRES", "HHOLDRES", "HHOLDS"]

BOROUGH_KEY = "GSS_CODE"
BOROUGH_NAME = "NAME"
PROFILES_KEY = "Code"
# local authority district codes of the London boroughs
BOROUGH_CODE_PREFIX = "E09"


def download_data(url, data_dir, file_name, known_hash=None):
    """Download data and store it in the specified directory using Pooch.

    Parameters
    ----------
    url : str
        URL from which the data will be downloaded
    data_dir : str
        Directory to store the downloaded data
    file_name : str
        Name of the downloaded data file with its extension (not full path)
    known_hash : str
        SHA256 hash of downloaded file

    Notes
    -----
    This only downloads data if necessary, i.e. if the data file does not
    already exist in the directory. A text file recording the download date,
    URL and hash is written next to the data file.
    """
    data_file = os.path.join(data_dir, file_name)
    if not os.path.isfile(data_file):
        os.makedirs(data_dir, exist_ok=True)
        pooch.retrieve(
            url=url, known_hash=known_hash, fname=file_name, path=data_dir
        )
        print(f"Data downloaded on: {datetime.now(tz=timezone.utc)}")
        with open(f"{data_file}.txt", "w", encoding="utf-8") as outfile:
            outfile.write(
                f"Data downloaded on: {datetime.now(tz=timezone.utc)}\n"
                f"Download URL: {url}\n"
                f"SHA256 hash: {pooch.file_hash(data_file)}\n"
            )
    else:
        print(f"Data '{file_name}' already exists in '{data_dir}'.")
        if os.path.isfile(f"{data_file}.txt"):
            with open(f"{data_file}.txt", encoding="utf-8") as f:
                print(f.read())


def extract_archive(data_file, extract_dir=None):
    """Unzip an archive unless it has already been extracted.

    Parameters
    ----------
    data_file : str
        Path to the Zip file
    extract_dir : str
        Directory to extract into; defaults to the archive path without its
        ``.zip`` extension

    Returns
    -------
    str
        Path to the directory holding the extracted files
    """
    if extract_dir is None:
        extract_dir = os.path.splitext(data_file)[0]
    if os.path.isdir(extract_dir) and os.listdir(extract_dir):
        print(f"'{data_file}' already extracted to '{extract_dir}'.")
    else:
        with ZipFile(data_file) as z:
            z.extractall(extract_dir)
            print(f"Extracted {len(z.namelist()):,} files to '{extract_dir}'.")
    return extract_dir


def read_shapefile_from_zip(data_path, endswith=".shp"):
    """Read the Shapefile layer from a Zip file.

    Parameters
    ----------
    data_path : str
        Path to the Zip file
    endswith : str
        What the Shapefile's filename ends with

    Returns
    -------
    geopandas.GeoDataFrame
        Geodataframe of the Shapefile's data
    """
    with ZipFile(data_path) as z:
        member = [x for x in z.namelist() if x.endswith(endswith)][0]
    data_shp = gpd.read_file(os.path.join(f"zip://{data_path}!" + member))
    return data_shp


def read_shapefile(data_dir, endswith=".shp"):
    """Read the first Shapefile found below an extracted data directory.

    Parameters
    ----------
    data_dir : str
        Directory to search, including subdirectories
    endswith : str
        What the Shapefile's filename ends with

    Returns
    -------
    geopandas.GeoDataFrame
        Geodataframe of the Shapefile's data
    """
    matches = sorted(
        glob.glob(os.path.join(data_dir, "**", f"*{endswith}"), recursive=True)
    )
    if not matches:
        raise ValueError(f"No file ending with '{endswith}' in '{data_dir}'")
    return gpd.read_file(matches[0])


def read_boroughs(
    data_path,
    endswith=MSOA_SHAPEFILE,
    code="LAD11CD",
    name="LAD11NM",
    counts=None,
):
    """Read London borough polygons with census population counts.

    The 2011 MSOA layer is dissolved to borough level, summing the census
    counts of each borough's MSOAs.

    Parameters
    ----------
    data_path : str
        Path to the boundaries Zip file or to its extracted directory
    endswith : str
        What the MSOA Shapefile's filename ends with
    code : str
        Borough code column of the MSOA layer
    name : str
        Borough name column of the MSOA layer
    counts : list[str]
        Count columns to sum; defaults to ``MSOA_COUNTS``

    Returns
    -------
    geopandas.GeoDataFrame
        One row per borough with ``GSS_CODE``, ``NAME``, the summed counts,
        ``HECTARES`` and ``POPDEN`` (usual residents per hectare)
    """
    if counts is None:
        counts = MSOA_COUNTS
    if os.path.isdir(data_path):
        msoa = read_shapefile(data_dir=data_path, endswith=endswith)
    else:
        msoa = read_shapefile_from_zip(data_path=data_path, endswith=endswith)
    boroughs = (
        msoa[[code, name] + counts + ["geometry"]]
        .to_crs(CRS)
        .dissolve(by=[code, name], aggfunc="sum", as_index=False)
        .rename(columns={code: BOROUGH_KEY, name: BOROUGH_NAME})
    )
    boroughs["HECTARES"] = boroughs.area / 10000
    if "USUALRES" in boroughs.columns:
        boroughs["POPDEN"] = boroughs["USUALRES"] / boroughs["HECTARES"]
    boroughs = boroughs.sort_values(BOROUGH_KEY).reset_index(drop=True)
    return boroughs


def read_borough_profiles(data_path, key=PROFILES_KEY, boroughs_only=True):
    """Read the London borough profiles CSV.

    Parameters
    ----------
    data_path : str
        Path to the CSV file
    key : str
        Column holding the borough code
    boroughs_only : bool
        Drop the regional and national comparator rows

    Returns
    -------
    pandas.DataFrame
        Dataframe of the borough profiles

    Notes
    -----
    The published file is Latin-1 encoded, uses ``"."`` for missing values
    and commas as thousands separators.
    """
    profiles = pd.read_csv(
        data_path,
        encoding="latin-1",
        na_values=[".", "n/a"],
        thousands=",",
    )
    profiles[key] = join.normalise_keys(profiles[key])
    if boroughs_only:
        profiles = profiles[
            profiles[key].str.startswith(BOROUGH_CODE_PREFIX, na=False)
        ].reset_index(drop=True)
    return profiles
