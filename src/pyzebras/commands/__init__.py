"""Shell commands exposing pyzebras functionalities.

This module contains the shell commands that can be used to interact with pyzebras.

ZDescribe
=========

``pyzebras-describe`` computes summary statistics of a column of a CSV file::

    pyzebras-describe stocks.csv -c Close

The statistics can be computed for each group of rows
sharing the same value in another column::

    pyzebras-describe stocks.csv -c Close -g Year
"""
