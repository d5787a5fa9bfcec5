"""aliasmenu - terminal menu for your ~/.bash_aliases"""

__version__ = "0.1.0"
