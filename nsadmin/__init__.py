"""
nsadmin.

Command-line administration client for namespace-scoped database
services. See nsadmin.cli.main for the command surface.
"""

__version__ = "0.1.0"
