"""
Shape examples for substitutability and interface segregation.

- liskov: a Square that subclasses Rectangle and breaks its setter contract
- fat_interface: a Square that keeps Rectangle's setters as no-ops
- segregated: shapes sharing only area, each adding its own mutators
"""

from . import fat_interface, liskov, segregated

__all__ = ["fat_interface", "liskov", "segregated"]
