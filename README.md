# simplegl

simplegl is a small 3D toolkit written in pure Python. It has no dependencies outside the standard library.

## Modules

### `simplegl.vecmath`

- `Vector3`: a mutable 3D vector.
  - In-place methods: `add`, `sub`, `mult`, `div`, `scale` and `normalize`.
  - Methods that return a value: `len`, `len2` and `normalized`.
  - Static methods `Vector3.cross` and `Vector3.dot`.
  - Arithmetic operators (`+`, `-`, `*`, `/`, unary `-` and the in-place forms), comparison and iteration.
- `Rotation`: Euler angles about x, y and z, held in a `Vector3` together with an `AngleUnit` (`DEGREE` or `RADIAN`). `to_radian` and `to_degree` return converted copies.
- `Matrix4`: a 4x4 matrix stored as 16 floats in `MatrixOrder.ROW_MAJOR` or `MatrixOrder.COLUMN_MAJOR`.
  - Elements are read and written as `m[row, col]`.
  - Methods: `identity`, `reset`, `transpose`, `set_order`, `mult` (by a scalar or by another matrix) and `div`.
- `to_radian` and `to_degree`: convert angles.

### `simplegl.properties`

`Properties` holds the position, rotation and scale of an object.

- The properties `pos`, `rot` and `scale` return copies of these values. Assigning to them replaces the values.
- `translate` adds to the position, `rotate` adds to the rotation and `enlarge` adds to the scale. Each one takes either a vector or three numbers. Plain numbers given to `rotate` are in degrees.
- Every change sets `matrix_changed`.
- `copy` returns an independent copy.

The `matrix` attribute starts as the identity matrix. `Properties` does not recompute it when the position, rotation or scale change.

### `simplegl.trackball`

A virtual trackball that turns mouse movement into quaternion rotations. Quaternions are `(x, y, z, w)` tuples.

- `trackball(p1x, p1y, p2x, p2y)` gives the rotation for a pointer moving between two points. Coordinates are in [-1, 1].
- `axis_to_quat` gives the quaternion for a rotation by an angle about an axis.
- `project_to_sphere` projects a point onto the trackball surface.
- `add_quats` combines two rotations.
- `normalize_quat` rescales a quaternion by the sum of the squares of its components.
- `build_rotmatrix` gives the 4x4 rotation matrix of a quaternion.
- `QuaternionAccumulator.add` combines rotations like `add_quats`. It also renormalises the result every 98 calls.

### `simplegl.voxelizer`

`voxelize(mesh, voxel_size_x, voxel_size_y, voxel_size_z, precision)` turns a triangle `Mesh` into a `Mesh` made of voxel cubes. The output has 8 vertices and 36 indices per cube, plus face normals.

- `precision` widens each voxel for the overlap test, which reduces holes in the result.
- Triangles with zero area are skipped.
- Bad index counts, out-of-range indices and voxel sizes that are not positive raise `ValueError`.

The building blocks are available on their own: `triangle_box_overlap`, `plane_box_overlap`, `triangle_area`, `map_to_voxel` and `vertex_hash`.

### `simplegl.objwriter`

Data classes describe a model: `Attrib`, `Shape`, `MeshData`, `Index` and `Material`.

- `write_obj(filename, attrib, shapes, materials, coord_transform=False)` writes an `.obj` file. It also writes the matching `.mtl` file next to it, through `write_mtl`. With `coord_transform`, the y and z axes are swapped and the new z is negated.
- `stitch_objs(attributes, shapes, materials)` merges several models into one. It offsets the vertex, normal, texcoord and material indices, and adds a suffix to each shape name (`_0000`, `_0001`, ...).

## What it does not do

simplegl does not render anything, open windows or read model files. It computes geometry and writes `.obj` and `.mtl` files. Displaying the results is left to other tools.

## Installing

```
pip install .
```

## Example

```python
from simplegl.vecmath import Vector3
from simplegl.properties import Properties

props = Properties()
props.translate(2, 3, -1)
props.enlarge(Vector3(1, 2, 3))
print(props.pos)    # Vector3(2.0, 3.0, -1.0)
print(props.scale)  # Vector3(2.0, 3.0, 4.0)
```

## Running the tests

```
pip install .[test]
pytest
```