"""Grid raycaster: .cub scene parsing and validation, DDA ray casting, a frame buffer renderer and a pygame front end."""

__version__ = "0.1.0"