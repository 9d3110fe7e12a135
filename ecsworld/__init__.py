"""Entity-component-system scene model: transforms, cameras, lights, meshes, materials and assets."""

__version__ = "0.1.0"