"""Dynamo project generator.

Creates a new Dynamo application skeleton from a fixed set of templates::

    python -m dynamo_new hello_world
    python -m dynamo_new hello_world --app hello_world --module HelloWorld
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
