"""Shipment CSV → journeys, route groups and Road/Sea weight charts."""

__version__ = "0.1.0"
