"""
Version 1 of the dashboard API.

Mounted under the configured API prefix (``/api`` by default), which
is where the dashboard front end expects it.
"""
