"""Interfaces (application boundary) for DIRSTORE.

Defines framework-free contracts: the file store ABC, its error taxonomy and
the filename rules every backend shares.

Dependency rule: this package is independent; do not import from any other
`dirstore.*` modules. It may be imported by `dirstore.adapters` and
`dirstore.bootstrap`.
"""
