"""london-borough-maps (lbmap)

Reading, inspecting, joining and mapping London borough polygons alongside
borough profile data

https://github.com/london-borough-maps/london-borough-maps
"""

__author__ = """London Borough Maps contributors"""
__version__ = "2026.10.0"
__copyright__ = "Copyright (C) 2026 London Borough Maps contributors"
