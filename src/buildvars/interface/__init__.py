"""
Interface layer package.

User-facing entry points; currently the command line only.
"""
