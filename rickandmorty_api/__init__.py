"""
Top‑level package for the Rick and Morty character API.

This file makes ``rickandmorty_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``rickandmorty_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
