"""Conversion activities.

- convert_kml: Stream one KML file into a JSON array of place records
"""
