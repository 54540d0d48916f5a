# cckit

This package collects small helpers that many Python programs need:

- **Math** (`cckit.constants`, `cckit.vectors`, `cckit.mat3`, `cckit.mat4`, `cckit.quat`): the `Vec2`, `Vec3` and `Vec4` vectors, the `Mat3` and `Mat4` matrices, the `Quat` quaternion, and common constants.
- **Filesystem** (`cckit.fs`): path queries and path manipulation, copying and removing files, creating and removing directories, and listing files.
- **Logging** (`cckit.log`): a process-wide logger. It can pass its records to your own callback, or fall back to stderr.
- **Strings** (`cckit.strings`): comparisons that can ignore case, trimming, splitting with a choice of how empty tokens are handled, and conversion between UTF-8 and the GB family of encodings.

## Installation

```
pip install cckit
```

It needs Python 3.10 or later and has no runtime dependencies.

## Math

```python
from cckit.vectors import Vec3
from cckit.mat4 import Mat4
from cckit.quat import Quat
from cckit.constants import HALF_PI

v = Vec3(1.0, 2.0, 3.0)
w = Vec3(4.0, 5.0, 6.0)
print(v.dot(w))          # 32.0
print(v.cross(w))        # Vec3(x=-3.0, y=6.0, z=-3.0)

q = Quat.from_axis_angle(Vec3(0.0, 0.0, 1.0), HALF_PI)
print(q.rotate(Vec3(1.0, 0.0, 0.0)))   # approximately (0, 1, 0)

m = Mat4.from_translation(Vec3(1.0, 2.0, 3.0))
print(m.transform_vec3(Vec3(0.0, 0.0, 0.0)))  # Vec3(x=1.0, y=2.0, z=3.0)
```

- Vectors and quaternions are frozen dataclasses. Normalizing a zero vector gives back the zero vector. Normalizing a near-zero quaternion gives the identity.
- Matrices are indexed as `m[row, col]`. `m[row]` returns the whole row as a tuple. Constructor arguments are given in row order. Storage is column-major, and `column_major()` returns it. `from_column_major()` builds a matrix from that layout.
- Matrix and quaternion equality allows a tolerance of `constants.EPSILON` (1e-6).
- If a matrix is singular, `Mat3.inverse()` returns the identity matrix and `Mat4.inverse()` raises `ValueError`.
- `Quat.from_rotation_matrix()`, `quat.from_mat3()` and `quat.from_mat4()` extract a rotation from a matrix. `Quat.to_mat4()` goes the other way.
- `Quat.slerp()` interpolates along the shortest arc. `Quat.to_euler()` returns `Vec3(pitch, yaw, roll)`.

## Filesystem

```python
from cckit import fs

fs.ensure_path_exists("build/output")
fs.copy_file("notes.txt", "build/output/notes.txt", True)
print(fs.list_files("build/output", {".txt"}))
print(fs.get_directory_name("/path/to/file.txt"))   # "to"
```

- Paths returned by these functions always use forward slashes. A backslash in an input path is treated as a separator.
- Operations that can fail, such as `copy_file`, `remove_file`, `create_directory` and `remove_directory_all`, return `True` or `False` and do not raise.
- `get_file_size` returns `None` if the path is not a regular file.
- `list_files` returns the regular files directly inside the folder, sorted. If the folder does not exist, it returns an empty list.
- `get_directory_path` returns the path itself, lexically normalized, when the path is an existing directory or ends in a separator. Otherwise it returns the parent. An empty path raises `ValueError`.

## Logging

```python
from cckit import log

def handler(level, loc, message, context):
    print(level.name, message)

log.set_log_callback(handler, None, False)
log.info("hello")
```

The callback receives four arguments:

- a `LogLevel`;
- a `SourceLoc`;
- the formatted line, with a timestamp and the level name;
- the context you passed to `set_log_callback`.

Logging from inside the callback is written to stderr instead.

If no callback is set, records at INFO and above go to a stderr fallback, and a one-time warning is printed first. Call `log.disable_fallback()` to silence this output.

The default level is INFO. Change it with `log.set_level()`.

`log.log()` and `log.logf()` attach a source location and bypass the level check. `logf` uses `%`-style formatting and cuts the message to 4095 characters.

`log.shutdown()` clears the callback and releases the logger. The logger is created again the next time it is used.

## Strings

```python
from cckit import strings
from cckit.strings import SplitMode

strings.starts_with("Hello", "he", True)              # True
strings.split("a,,b,", ",", SplitMode.TRIM_TRAILING)  # ['a', '', 'b']
strings.trim("  padded  ")                             # 'padded'
gbk_bytes = strings.to_gbk("中文")
strings.from_gbk(gbk_bytes)                            # '中文'
```

- Case operations change only ASCII letters.
- `split` raises `ValueError` for an empty delimiter.
- `convert(data, from_code, to_code)` re-encodes data between any two codecs that Python knows. An empty codec name means the system default.

## Running the tests

```
pip install -e .[test]
pytest
```