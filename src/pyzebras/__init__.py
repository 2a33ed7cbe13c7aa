"""pyzebras

Data manipulation and analysis of in-memory records,
offering the convenience of pandas or R.

Data is represented with plain Python lists and dicts,
and every operation is a pure function that returns
new data instead of modifying what it received.

The library is constituted by multiple components, each isolated within its own
package and each self documented in literate programming style.

The primary components are:

* The Compute functions, to load, reshape, summarize, group and join the data.
* The Dataframe API, which allows to chain the compute functions as methods.
* The Commands, to describe CSV files from the shell.

For the user guide and code documentation of each component, refer to the
component itself.
"""

from . import compute

__all__ = ("compute",)
