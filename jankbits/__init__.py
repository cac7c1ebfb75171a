"""A small 2D arcade game: screens, menus, movement, animation and a firework launcher."""

__version__ = "0.1.0"