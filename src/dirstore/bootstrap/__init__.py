"""Bootstrap (composition root) for DIRSTORE.

Assembles a file store at runtime: reads configuration and wires the selected
concrete adapter.

Import rules:
- Host programs may import *this* package instead of the adapters directly.
- This package may import: `dirstore.adapters`, `dirstore.interfaces`, and
  `dirstore.config`.
- Inner layers must not import `dirstore.bootstrap`.
"""
