"""Adapters (infrastructure) for DIRSTORE.

Provide concrete implementations of the file store contract defined in
`dirstore.interfaces` (local filesystem, in-memory).

Dependency rule: may import `dirstore.interfaces`; interfaces must not import
this package.
"""
