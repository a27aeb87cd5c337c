"""emp-comp - Employee compensation calculator."""

__version__ = "0.1.0"
