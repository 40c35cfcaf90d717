"""
Service layer abstraction.

Each service encapsulates one piece of query logic.  The repository
speaks to the upstream client, the statistics service aggregates
decoded records and the character service composes both for the API
handlers.  Services hold no state between calls.
"""
