# minirt

A small ray tracer. It reads a scene description from a `.rt` file and
renders it with ambient light, one point light with diffuse (Lambertian)
shading and hard shadows. Supported objects are spheres, planes and
finite cylinders. The result is written as a binary PPM (P6) image.

The package has no dependencies beyond the Python standard library.

## Installation

```
pip install .
```

## Usage

```
minirt scene.rt
minirt scene.rt -o picture.ppm --width 320 --height 240
```

Options:

| Option              | Meaning                                         | Default                      |
|---------------------|-------------------------------------------------|------------------------------|
| `-o`, `--output`    | path of the PPM image to write                  | the scene path with `.ppm`   |
| `--width N`         | image width in pixels, a positive integer       | 800                          |
| `--height N`        | image height in pixels, a positive integer      | 600                          |

The command parses the scene, renders it and writes the image, then
exits with status 0. If the command line is wrong, the scene file is
invalid or the image cannot be written, it prints `Error` followed by a
message on the next line to standard error and exits with status 1.

Rendering is done in pure Python, pixel by pixel, so a full 800×600
image takes a while; `--width` and `--height` give quicker previews.

## Scene format

The file name must end in `.rt`, and the file must contain something
other than whitespace. Each line that is not empty and does not start
with `#` describes one element. Fields are separated by spaces or tabs.
Vectors and colours are written as comma-separated triples; spaces
around the commas are allowed.

| Identifier | Fields                                         | Notes                                    |
|------------|------------------------------------------------|------------------------------------------|
| `A`        | ratio `R,G,B`                                  | exactly one                              |
| `C`        | `x,y,z` `dx,dy,dz` fov                         | exactly one, fov in `[0, 180]` degrees   |
| `L`        | `x,y,z` ratio [`R,G,B`]                        | exactly one, white if no colour is given |
| `sp`       | `x,y,z` diameter `R,G,B`                       | diameter > 0                             |
| `pl`       | `x,y,z` `nx,ny,nz` `R,G,B`                     |                                          |
| `cy`       | `x,y,z` `ax,ay,az` diameter height `R,G,B`     | diameter and height > 0                  |

- Numbers are plain decimals such as `-12.5`, `3` or `.25`; exponents,
  a trailing dot and a sign detached from its digits are rejected.
- Ratios lie in `[0.0, 1.0]`.
- Colour components are integers in `[0, 255]`.
- Direction, normal and axis vectors have components in `[-1, 1]`, a
  squared length between 0.9 and 1.1, and are normalised when read.
- A cylinder starts at its `x,y,z` point and extends `height` along its
  axis.
- A scene needs `A`, `C`, `L` and at least one object.

Example:

```
A 0.2 255,255,255
C 0,0,-10 0,0,1 70
L -10,10,-10 0.7
sp 0,0,0 4 255,0,0
pl 0,-2,0 0,1,0 200,200,200
cy 3,-2,2 0,1,0 1.5 4 0,120,255
```

## Library use

```python
from minirt.parser import parse_scene
from minirt.render import render
from minirt.cli import write_ppm

scene = parse_scene("scene.rt")
pixels = render(scene, 320, 240)   # rows of 0xRRGGBB ints, top row first
write_ppm(pixels, "scene.ppm")
```

`parse_scene` raises `minirt.scene.SceneError` when the file is missing,
unreadable or invalid; the exception message says what is wrong.
`minirt.parser.parse_lines` builds a scene from an iterable of lines
instead of a file.

The modules:

- `minirt.vector` – `Vec3` and `Ray`.
- `minirt.color` – `Color`, with clamping and packing to `0xRRGGBB`.
- `minirt.scene` – the scene data classes and `SceneError`.
- `minirt.values` – parsing of numbers, vectors and colours.
- `minirt.elements` – one builder per scene line kind.
- `minirt.parser` – scene file reading and validation.
- `minirt.intersect` – ray hits on spheres, planes and cylinders.
- `minirt.camera` – the camera viewport and primary rays.
- `minirt.render` – closest hits, shadows, lighting and whole images.
- `minirt.cli` – the `minirt` command and `write_ppm`.

## What it does not do

- It does not open a window or show the image; it only writes a PPM file.
- There is a single point light and no specular highlights, reflections,
  refraction or anti-aliasing.
- Cylinders have no end caps: only their side surface is rendered.