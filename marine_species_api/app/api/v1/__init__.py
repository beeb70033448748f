"""
Version 1 of the API.

Bundles the taxonomy and marine species resources, the generic call
endpoint and the service information route.
"""
