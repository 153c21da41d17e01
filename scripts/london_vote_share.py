#!/usr/bin/env python
# coding: utf-8

# # Party vote share in London boroughs
#
# Exercise: repeat the join and plot with the 2014 local election results of
# the London borough profiles.

# In[1]:


import os

import matplotlib.pyplot as plt

from lbmap import data as rd
from lbmap import fortify as ft
from lbmap import join as jn
from lbmap import plotting as lp

# In[2]:


plt.rcParams["xtick.major.size"] = 0
plt.rcParams["ytick.major.size"] = 0


# In[3]:


PARTIES = {
    "Proportion_of_seats_won_by_Conservatives_in_2014_election": (
        "Conservatives"
    ),
    "Proportion_of_seats_won_by_Labour_in_2014_election": "Labour",
    "Proportion_of_seats_won_by_Lib_Dems_in_2014_election": "Lib Dems",
}
TURNOUT = "Turnout_at_2014_local_elections"


# In[4]:


rd.download_data(
    url=rd.BOUNDARIES_URL,
    data_dir=rd.DATA_DIR,
    file_name=rd.BOUNDARIES_FILE_NAME,
)
rd.download_data(
    url=rd.PROFILES_URL,
    data_dir=rd.DATA_DIR,
    file_name=rd.PROFILES_FILE_NAME,
)


# In[5]:


lnd = rd.read_boroughs(
    data_path=rd.extract_archive(
        os.path.join(rd.DATA_DIR, rd.BOUNDARIES_FILE_NAME)
    )
)
profiles = rd.read_borough_profiles(
    os.path.join(rd.DATA_DIR, rd.PROFILES_FILE_NAME)
)


# In[6]:


profiles[["Code", "Area_name"] + list(PARTIES)].describe()


# In[7]:


matched = jn.key_match(profiles[rd.PROFILES_KEY], lnd[rd.BOROUGH_KEY])


# In[8]:


lnd = jn.attribute_join(
    lnd,
    profiles,
    left_on=rd.BOROUGH_KEY,
    right_on=rd.PROFILES_KEY,
    columns=list(PARTIES) + [TURNOUT],
)


# ## Conservative seats

# In[9]:


CONSERVATIVES = list(PARTIES)[0]
lnd_f = ft.fortify_with_attributes(
    lnd, region=rd.BOROUGH_KEY, columns=[CONSERVATIVES]
)
lp.plot_fortified(
    lnd_f,
    column=CONSERVATIVES,
    cmap="Blues",
    title="Proportion of seats won by Conservatives, 2014",
)
plt.tight_layout()
plt.show()


# ## All parties

# In[10]:


fig = lp.plot_party_shares(
    lnd, columns=list(PARTIES), labels=list(PARTIES.values())
)
fig.suptitle("Proportion of seats won, 2014 local elections")
plt.show()


# In[11]:


lp.plot_choropleth(
    lnd,
    column=TURNOUT,
    scheme="naturalbreaks",
    k=4,
    cmap="crest",
    legend_label="Turnout [%]",
    title="Turnout at the 2014 local elections",
)
plt.tight_layout()
plt.show()


# ## Interactive map

# In[12]:


lp.plot_interactive_map(
    lnd,
    columns=list(PARTIES) + [TURNOUT],
    aliases=[f"{v} seats [%]" for v in PARTIES.values()] + ["Turnout [%]"],
)
