"""
Clients for external services.

``upstream`` holds the client for the public Rick and Morty API and the
``UpstreamClient`` protocol the services depend on, so tests can hand
in any object with a compatible ``fetch`` method.
"""
