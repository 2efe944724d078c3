"""Write Wavefront .obj/.mtl files and merge several loaded models into one."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO


@dataclass
class Index:
    """Zero-based indices of one face corner; -1 marks a missing component."""

    vertex_index: int = -1
    normal_index: int = -1
    texcoord_index: int = -1


@dataclass
class MeshData:
    """Face corners, vertex count of each face and material of each face."""

    indices: list[Index] = field(default_factory=list)
    num_face_vertices: list[int] = field(default_factory=list)
    material_ids: list[int] = field(default_factory=list)

    def copy(self) -> MeshData:
        return MeshData(
            [Index(i.vertex_index, i.normal_index, i.texcoord_index) for i in self.indices],
            list(self.num_face_vertices),
            list(self.material_ids),
        )


@dataclass
class Shape:
    """A named group of faces."""

    name: str = ""
    mesh: MeshData = field(default_factory=MeshData)

    def copy(self) -> Shape:
        return Shape(self.name, self.mesh.copy())


@dataclass
class Material:
    """Surface description written to an .mtl file."""

    name: str = ""
    ambient: tuple[float, float, float] = (0.0, 0.0, 0.0)
    diffuse: tuple[float, float, float] = (0.0, 0.0, 0.0)
    specular: tuple[float, float, float] = (0.0, 0.0, 0.0)
    transmittance: tuple[float, float, float] = (0.0, 0.0, 0.0)
    emission: tuple[float, float, float] = (0.0, 0.0, 0.0)
    shininess: float = 1.0
    ior: float = 1.0
    illum: int = 0


@dataclass
class Attrib:
    """Flat attribute arrays: 3 floats per vertex, normal and colour, 2 per texcoord."""

    vertices: list[float] = field(default_factory=list)
    normals: list[float] = field(default_factory=list)
    texcoords: list[float] = field(default_factory=list)
    colors: list[float] = field(default_factory=list)


def _f(value: float) -> str:
    return f"{value:f}"


def _triples(values: list[float]):
    for k in range(0, len(values) - 2, 3):
        yield values[k], values[k + 1], values[k + 2]


def _file_basename(filename: str) -> str:
    dot = filename.rfind(".")
    return filename[:dot] if dot != -1 else ""


def write_mtl(filename: str | Path, materials: list[Material]) -> None:
    """Write ``materials`` to an .mtl file; raises OSError if it cannot be written."""
    with open(filename, "w", encoding="utf-8") as fp:
        for mat in materials:
            fp.write(f"newmtl {mat.name}\n")
            fp.write("Ka {} {} {}\n".format(*map(_f, mat.ambient)))
            fp.write("Kd {} {} {}\n".format(*map(_f, mat.diffuse)))
            fp.write("Ks {} {} {}\n".format(*map(_f, mat.specular)))
            fp.write(
                f"Kt {_f(mat.transmittance[0])} {_f(mat.specular[1])} {_f(mat.specular[2])}\n"
            )
            fp.write("Ke {} {} {}\n".format(*map(_f, mat.emission)))
            fp.write(f"Ns {_f(mat.shininess)}\n")
            fp.write(f"Ni {_f(mat.ior)}\n")
            fp.write(f"illum {int(mat.illum)}\n")
            fp.write("\n")


def _format_corner(ref: Index, has_vn: bool, has_vt: bool) -> str:
    v = ref.vertex_index + 1
    if has_vn and has_vt:
        return f" {v}/{ref.texcoord_index + 1}/{ref.normal_index + 1}"
    if has_vn:
        return f" {v}//{ref.normal_index + 1}"
    if has_vt:
        return f" {v}/{ref.texcoord_index + 1}"
    return f" {v}"


def _write_shape(
    fp: TextIO, shape: Shape, materials: list[Material], prev_material_id: int
) -> int:
    fp.write("\n")
    fp.write(f"g {shape.name or 'Unknown'}\n")

    indices = shape.mesh.indices
    has_vn = bool(indices) and indices[0].normal_index != -1
    has_vt = bool(indices) and indices[0].texcoord_index != -1

    k = 0
    for face, count in enumerate(shape.mesh.num_face_vertices):
        if k >= len(indices):
            break
        material_id = shape.mesh.material_ids[face]
        if material_id != prev_material_id:
            if not 0 <= material_id < len(materials):
                raise ValueError(f"material id {material_id} out of range")
            fp.write(f"usemtl {materials[material_id].name}\n")
            prev_material_id = material_id
        corners = indices[k:k + count]
        fp.write("f" + "".join(_format_corner(c, has_vn, has_vt) for c in corners) + "\n")
        k += count
    return prev_material_id


def write_obj(
    filename: str | Path,
    attrib: Attrib,
    shapes: list[Shape],
    materials: list[Material],
    coord_transform: bool = False,
) -> None:
    """Write an .obj file and its .mtl companion next to it.

    With ``coord_transform`` the y and z axes are swapped and the new z negated.
    Raises OSError if a file cannot be written.
    """
    filename = str(filename)
    material_filename = _file_basename(filename) + ".mtl"

    with open(filename, "w", encoding="utf-8") as fp:
        fp.write(f"mtllib {material_filename}\n\n")

        for x, y, z in _triples(attrib.vertices):
            if coord_transform:
                fp.write(f"v {_f(x)} {_f(z)} {_f(-y)}\n")
            else:
                fp.write(f"v {_f(x)} {_f(y)} {_f(z)}\n")
        fp.write("\n")

        for x, y, z in _triples(attrib.normals):
            if coord_transform:
                fp.write(f"vn {_f(x)} {_f(z)} {_f(-y)}\n")
            else:
                fp.write(f"vn {_f(x)} {_f(y)} {_f(z)}\n")
        fp.write("\n")

        texcoords = attrib.texcoords
        for k in range(0, len(texcoords) - 1, 2):
            fp.write(f"vt {_f(texcoords[k])} {_f(texcoords[k + 1])}\n")

        prev_material_id = -1
        for shape in shapes:
            prev_material_id = _write_shape(fp, shape, materials, prev_material_id)

    write_mtl(material_filename, materials)


def stitch_objs(
    attributes: list[Attrib],
    shapes: list[list[Shape]],
    materials: list[list[Material]],
) -> tuple[Attrib, list[Shape], list[Material]]:
    """Merge several models into one, offsetting indices and suffixing shape names.

    The i-th shape list and material list belong to the i-th attribute set.
    """
    if not len(attributes) == len(shapes) == len(materials):
        raise ValueError(
            "sizes of attributes, shapes and materials don't fit: "
            f"{len(attributes)} {len(shapes)} {len(materials)}"
        )

    out_attrib = Attrib()
    out_shapes: list[Shape] = []
    out_materials: list[Material] = []

    for i, (attrib, model_shapes, model_materials) in enumerate(
        zip(attributes, shapes, materials)
    ):
        material_offset = len(out_materials)
        vertex_offset = len(out_attrib.vertices) // 3
        normal_offset = len(out_attrib.normals) // 3
        texcoord_offset = len(out_attrib.texcoords) // 2

        for shape in model_shapes:
            new_shape = shape.copy()
            new_shape.name = f"{shape.name}_{i:04d}"
            new_shape.mesh.material_ids = [
                m + material_offset for m in new_shape.mesh.material_ids
            ]
            for ref in new_shape.mesh.indices:
                if ref.vertex_index > -1:
                    ref.vertex_index += vertex_offset
                if ref.normal_index > -1:
                    ref.normal_index += normal_offset
                if ref.texcoord_index > -1:
                    ref.texcoord_index += texcoord_offset
            out_shapes.append(new_shape)

        out_materials.extend(model_materials)
        out_attrib.vertices.extend(attrib.vertices)
        out_attrib.normals.extend(attrib.normals)
        out_attrib.texcoords.extend(attrib.texcoords)
        out_attrib.colors.extend(attrib.colors)

    return out_attrib, out_shapes, out_materials