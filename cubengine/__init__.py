"""A small entity-component-system game engine with keyboard movement and sprite rendering."""

__version__ = "0.1.0"