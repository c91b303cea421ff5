"""
Northwind Employees data-access layer.

Create, read, update and delete operations over the ``Employees`` table
through a generic SQLAlchemy connection factory, with rows mapped to a plain
``Employee`` record and driver failures translated into a small set of
domain errors.
"""

__version__ = "0.1.0"
