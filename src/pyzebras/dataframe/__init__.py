"""Dataframe object built on top of the pyzebras compute functions.

A dataframe library is a tool designed to handle and manipulate structured data,
typically in the form of tables (i.e., rows and columns).
It allows users to load data from various sources (like CSV files or databases),
explore it, apply transformations, and analyze it.

The compute functions already work on plain lists of records,
but chaining many of them can become hard to read, as each call
has to wrap the previous one. The :class:`Dataframe` object
exposes the same functions as methods that can be chained
one after the other.
"""

from .dataframe import Dataframe

__all__ = ("Dataframe",)
