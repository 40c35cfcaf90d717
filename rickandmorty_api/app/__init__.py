"""
Application package initializer.

The application is a thin REST façade over the public Rick and Morty
character API.  It is organised into layers: ``clients`` talks to the
upstream service, ``services`` holds the query and statistics logic,
``schemas`` defines the character records and ``api`` exposes the
routes.  ``core`` contains configuration, logging and the error types
shared by all layers.
"""
