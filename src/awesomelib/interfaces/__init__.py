"""Interfaces for awesomelib.

Abstract contracts for the ambient sources that helpers depend on (clocks,
timer schedulers, ID generators). Injecting these keeps time- and
randomness-dependent helpers deterministic under test.

Dependency rule: this package is independent; do not import from any other
`awesomelib.*` modules.
"""
