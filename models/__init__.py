"""
Request, result and structure models of the supported services, and the
JSON marshalling that maps them to the wire.
"""
