"""
Contact Manager - Source Package

Command-line tools for keeping small personal lists:
a contact manager backed by a CSV file, and an interactive
bill tracker that lives for one console session.

DESIGN PRINCIPLES:
1. One invocation = load, change one thing, save
2. Bad lines in the data file never stop a load
3. No silent corrections of the file format
4. Every change is auditable
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Contact Manager Team"
