"""
Front-end for location strings given on the command line.
"""

from .location_parser import LocationParser, parse_location

__all__ = ["LocationParser", "parse_location"]
