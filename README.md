# gfxutils

A small, dependency-free toolkit for graphics work in pure Python: vectors,
matrices, a first-person camera, colour-space conversions, 8-bit images,
float height grids and a minimal OBJ mesh reader.

## Modules

- `gfxutils.rand.Random`: uniform random numbers, optionally seeded:
  `rand01`, `rand11`, `rand005`, `rand051`, `rand0_pi`, `rand(a, b)` and an
  in-place `shuffle`.
- `gfxutils.vec2.Vec2`: immutable 2D vector with component-wise and scalar
  arithmetic, `length`, `sqlength`, `normalize`, `clamp` and `random`.
- `gfxutils.vec3.Vec3`: immutable 3D vector with the same arithmetic plus
  indexing, `xy`, `dot`, `cross`, `normalize`, `reflect`, `refract` (returns
  `None` on total internal reflection), `min_v`, `max_v`, `clamp` and the
  random helpers `random`, `random_point_in_sphere`,
  `random_point_in_hemisphere`, `random_point_in_disc` and
  `random_unit_vector`. Each random helper takes an optional `Random`.
- `gfxutils.mat3.Mat3`: row-major 3x3 matrix (identity by default) with
  matrix, vector and scalar operations, `scaling`, `rotation_x/y/z`,
  `transpose`, `det` and `inverse`.
- `gfxutils.mat4.Mat4`: row-major 4x4 matrix with the same operations plus
  `translation`, `rotation_axis`, `transform4`, `perspective`, `frustum`,
  `ortho`, `look_at`, `mirror` and `stereo_look_at_and_projection`, which
  returns a `StereoMatrices` with left/right view and projection matrices.
  Multiplying a `Vec3` divides by the resulting w.
- `gfxutils.camera.Camera`: first-person camera. Set movement flags with
  `move_front`, `move_back`, `move_left`, `move_right`, advance with
  `update_position`, turn with `enable_mouse` and `mouse_move`, and read the
  result with `view_matrix`. Pitch is clamped to ±89 degrees.
- `gfxutils.color`: `rgb_to_hsv`, `hsv_to_rgb`, `hsl_to_hsv`, `hsv_to_hsl`,
  `rgb_to_cmy`, `cmy_to_rgb`, `rgb_to_cmyk` (returns a 4-tuple),
  `cmyk_to_rgb`, `rgb_to_yuv` and `yuv_to_rgb`. Hue is in degrees, other
  components in [0, 1].
- `gfxutils.image.Image`: 8-bit image with interleaved components. Includes
  `from_color`, `gen_test_image`, per-pixel access, bilinear `sample`,
  `multiply`, `generate_alpha`, `generate_alpha_from_luminance`,
  `to_grayscale`, `filter` (convolution with a `Grid2D` kernel), `crop`,
  `resample`, `crop_to_aspect_and_resample`, `flip_horizontal`,
  `flip_vertical`, `to_code` and `to_ascii_art`.
- `gfxutils.grid2d.Grid2D`: row-major grid of floats with bilinear `sample`,
  height-field `normal`, arithmetic with scalars and other grids (grids of
  different sizes are resampled to the larger size), `normalize`,
  `max_value`, `min_value`, `fill`, `to_signed_distance`, `to_byte_array`,
  `from_image`, `gen_random`, and binary `save` / `from_stream`.
- `gfxutils.objfile.ObjFile`: reads `v`, `vn` and triangular `f` records via
  `parse` (any iterable of lines) or `from_file`, with optional normalisation
  to a unit-sized model centred at the origin, and computes smooth per-vertex
  normals.

## Installation

```
pip install .
```

## Example

```python
from gfxutils.vec3 import Vec3
from gfxutils.mat4 import Mat4
from gfxutils.camera import Camera
from gfxutils.color import rgb_to_hsv

camera = Camera(Vec3(0.0, 0.0, 5.0))
camera.move_front(True)
camera.update_position()
view = camera.view_matrix()

projection = Mat4.perspective(45.0, 16 / 9, 0.1, 100.0)
mvp = projection * view * Mat4.rotation_y(30.0)

print(rgb_to_hsv(Vec3(1.0, 0.5, 0.0)))  # [30, 1, 1]
```

## What it does not do

The package does computation only. It opens no windows, draws nothing on
screen and talks to no graphics API; the matrices and images it produces are
for you to hand to whatever renderer you use. It does not read or write image
file formats such as PNG or BMP: an `Image` is built from raw bytes, and a
`Grid2D` is stored only in its own binary layout through `save` and
`from_stream`.

## Running the tests

```
pip install .[test]
pytest
```