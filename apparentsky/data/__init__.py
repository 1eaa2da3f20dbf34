"""Packaged static data for apparentsky."""
