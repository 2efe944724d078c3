"""3D vector math, object transforms, trackball rotation, voxelizer and OBJ writer."""

__version__ = "0.1.0"
__all__ = ["objwriter", "properties", "trackball", "vecmath", "voxelizer"]