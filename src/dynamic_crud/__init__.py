"""
DynamicCrud - Runtime SQL generation and execution for schema-less tables.

Builds parameterized INSERT/SELECT/UPDATE/DELETE/DDL statements from a table
name and loosely-typed column mappings, and executes them through SQLAlchemy.
"""

__version__ = "0.1.0"
