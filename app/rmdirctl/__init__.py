"""rmdirctl - Idempotent recursive directory removal.

Removes directory trees, treating already-absent paths as success and
reporting permission problems distinctly from other failures.
"""

__version__ = "0.1.0"
