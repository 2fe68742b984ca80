"""Interval bin lookup.

The bins layer parses bracket-notation interval strings and finds the first dataset row whose three
bin columns contain a given triple of values.
"""
