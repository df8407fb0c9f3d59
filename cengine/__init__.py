"""Entity-component engine core: logging, maths, OBJ meshes, transforms, cameras, input and systems."""

__version__ = "0.1.0"