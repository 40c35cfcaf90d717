"""
Pydantic schema definitions for character records.

The same models decode upstream bodies and serialize API responses, so
the field names here match the upstream JSON exactly.
"""
