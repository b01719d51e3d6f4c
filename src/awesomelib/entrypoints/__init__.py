"""Entrypoints (inbound adapters) for awesomelib.

Expose the helpers to the outside world; currently only the ``awesomelib``
command-line tool. Commands parse and validate input, call the helper
modules, and print results.
"""
