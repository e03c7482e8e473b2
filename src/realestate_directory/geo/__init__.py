"""
Geo Package

Suburb gazetteer and the bundled Australian suburb dataset.
"""
from src.realestate_directory.geo.gazetteer import SuburbGazetteer

__all__ = ["SuburbGazetteer"]
