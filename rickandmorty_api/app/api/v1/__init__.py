"""
Version 1 of the API.

This subpackage bundles the character endpoints.  Breaking changes
should be introduced in a new version subpackage.
"""
