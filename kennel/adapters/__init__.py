"""External adapters for Kennel.

This package provides implementations of the core port interfaces.

Adapter Organization:

- output/: Adapters for the line sink a dog echoes its name to (stdout, null)
"""
