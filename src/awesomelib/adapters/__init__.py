"""Adapters for awesomelib.

Concrete implementations of the contracts in `awesomelib.interfaces`: the
system and fixed clocks, the threading-based scheduler, and ID generators.

Dependency rule: may import `awesomelib.interfaces`; the helper modules import
from here only to obtain defaults.
"""
