#!/usr/bin/env python
# coding: utf-8

# # London boroughs
#
# Reading, inspecting, joining and mapping spatial data with Python.
#
# - Statistical GIS boundary files for London:
#   <https://data.london.gov.uk/dataset/statistical-gis-boundary-files-london>
# - London borough profiles:
#   <https://data.london.gov.uk/dataset/london-borough-profiles>

# ## Libraries
#
# GeoPandas reads the Shapefile and holds the polygons with their attribute
# table; pandas reads the CSV; Matplotlib draws the maps.

# In[1]:


import os
from zipfile import ZipFile

import matplotlib.pyplot as plt

from lbmap import data as rd
from lbmap import fortify as ft
from lbmap import functions as fns
from lbmap import join as jn
from lbmap import plotting as lp
from lbmap import summary as sm

# In[2]:


plt.rcParams["xtick.major.size"] = 0
plt.rcParams["ytick.major.size"] = 0


# ## Download and unzip the data

# In[3]:


rd.download_data(
    url=rd.BOUNDARIES_URL,
    data_dir=rd.DATA_DIR,
    file_name=rd.BOUNDARIES_FILE_NAME,
)
DATA_FILE = os.path.join(rd.DATA_DIR, rd.BOUNDARIES_FILE_NAME)


# In[4]:


[x for x in ZipFile(DATA_FILE).namelist() if x.endswith(".shp")]


# In[5]:


DATA_PATH = rd.extract_archive(data_file=DATA_FILE)


# ## Read the Shapefile
#
# The 2011 MSOA layer carries census population counts; dissolving it by
# local authority code gives one polygon per borough.

# In[6]:


lnd = rd.read_boroughs(data_path=DATA_PATH)


# ## Inspect the spatial object

# In[7]:


info = sm.summary(lnd)


# In[8]:


lnd.head()


# In[9]:


sm.structure(lnd)


# In[10]:


lnd.crs


# In[11]:


sm.geometry_overview(lnd)


# In[12]:


lnd[lnd["NAME"] == "Camden"]


# In[13]:


lp.plot_boroughs(lnd, title="London boroughs")
plt.tight_layout()
plt.show()


# ## Colour by population
#
# Shade each borough by its population relative to the most populous
# borough, then highlight the densest boroughs.

# In[14]:


lnd["USUALRES"].describe()


# In[15]:


lp.plot_shaded(
    lnd,
    colors=fns.shade_by_value(lnd["USUALRES"]),
    title="Usual residents (2011), relative to the maximum",
)
plt.tight_layout()
plt.show()


# In[16]:


lnd["POPDEN"] = fns.population_density(lnd)
dense = fns.select_by_threshold(lnd, "POPDEN", 100)
dense[["NAME", "POPDEN"]]


# In[17]:


ax = lp.plot_shaded(
    lnd,
    colors=fns.highlight(lnd, lnd["POPDEN"] > 100),
    title="Boroughs with more than 100 residents per hectare",
)
dense.plot(ax=ax, facecolor="none", edgecolor="darkred", linewidth=1)
plt.tight_layout()
plt.show()


# ## Join the borough profiles

# In[18]:


rd.download_data(
    url=rd.PROFILES_URL,
    data_dir=rd.DATA_DIR,
    file_name=rd.PROFILES_FILE_NAME,
)
profiles = rd.read_borough_profiles(
    os.path.join(rd.DATA_DIR, rd.PROFILES_FILE_NAME)
)


# In[19]:


profiles.shape


# In[20]:


ANXIETY = "Anxiety_score_2011-14_(out_of_10)"
profiles[["Code", "Area_name", ANXIETY]].head()


# Check that the profile codes match the codes of the spatial data before
# joining.

# In[21]:


matched = jn.key_match(profiles[rd.PROFILES_KEY], lnd[rd.BOROUGH_KEY])


# In[22]:


profiles.loc[~matched, ["Code", "Area_name"]]


# In[23]:


lnd = jn.attribute_join(
    lnd,
    profiles,
    left_on=rd.BOROUGH_KEY,
    right_on=rd.PROFILES_KEY,
    columns=["Area_name", ANXIETY],
)


# In[24]:


lnd[["NAME", "Area_name", ANXIETY]]


# In[25]:


lp.plot_choropleth(
    lnd,
    column=ANXIETY,
    legend_label="Anxiety score (out of 10)",
    title="Anxiety score, 2011-14",
)
plt.tight_layout()
plt.show()


# ## Fortify and plot
#
# The fortified table has one row per vertex; every ring is a group and
# each row carries the joined anxiety score.

# In[26]:


lnd_f = ft.fortify_with_attributes(
    lnd, region=rd.BOROUGH_KEY, columns=[ANXIETY]
)


# In[27]:


lnd_f.head()


# In[28]:


lnd_f.shape


# In[29]:


lp.plot_fortified(
    lnd_f, column=ANXIETY, title="Anxiety score, 2011-14 (fortified)"
)
plt.tight_layout()
plt.show()


# In[30]:


lp.plot_choropleth(
    lnd,
    column=ANXIETY,
    scheme="quantiles",
    k=5,
    legend_label="Anxiety score (out of 10)",
    title="Anxiety score, 2011-14 (quintiles)",
    basemap=True,
)
plt.tight_layout()
plt.show()
