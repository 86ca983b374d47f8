"""Core data structures: scopes, configuration, errors and diagnostics"""
