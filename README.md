# rtmath

Small, dependency-free building blocks for a ray tracer: homogeneous
vectors and 4x4 matrices. It also has a few text, byte-buffer, output and
line-reading helpers.

## Modules

### `rtmath.vector`

`Vector(x, y, z, w=0.0)` is a frozen dataclass. `w` is 0 for directions and
1 for points.

- `a + b` and `a - b` work on all four components.
- `-v` negates x, y and z and sets `w` to 0.
- `dot(other)` and `modulus()` use the spatial components only.
- `cross(other)`, `scale(factor)`, `mul(other)` (element-wise) and
  `div(divisor)` return directions (`w` = 0).
- `unit()` returns the normalised direction. It raises `ZeroDivisionError`
  for the zero vector.
- `reflect(normal)` normalises both vectors and reflects this one about
  `normal`.

`to_rad(deg)` converts degrees to radians.

### `rtmath.matrix`

`Matrix3(rows)` is a frozen 3x3 matrix with `det()`, computed by the rule of
Sarrus.

`Matrix4(rows, exist=False)` is a frozen 4x4 matrix. `exist` marks a composed
transform, and `a @ b` returns a product with `exist=True`. The class also
provides:

- `Matrix4.identity()` and `Matrix4.from_rows(rows, exist=False)`.
- `divide(divisor)`, `transpose()`, `minor(row, col)` (a `Matrix3`), `det()`
  and `adjugate()`.
- `inverse()`, which raises `ZeroDivisionError` for a singular matrix.

Rows of either class can be read with `m[i][j]`. A wrong shape raises
`ValueError`.

### `rtmath.strings`

- `find_char` and `find_last_char` return an index or `None`. Searching for
  NUL gives `len(s)`.
- `compare(s1, s2, n)` compares at most `n` characters. It returns 0 on a
  match, otherwise the difference of the code points at the first mismatch.
- `find_substring(haystack, needle, length)` searches only within the first
  `length` characters.
- `substring(s, start, length)` returns a slice of `s`.
- `trim(s, charset)` strips leading and trailing characters found in
  `charset`.
- `split(s, sep)` drops empty pieces.
- `join(s1, s2)` concatenates two strings.

### `rtmath.numbers`

- `atoi(text)` skips leading whitespace, reads one optional sign, then reads
  digits. It stops at the first character that is not a digit and returns 0
  when there are no digits.
- `itoa(n)` returns the decimal form of `n`.

### `rtmath.chars`

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` classify
  ASCII characters, given as one-character strings or as ints.
- `to_upper` and `to_lower` change the case of ASCII letters and return a
  value of the same type they were given.
- `map_chars(s, func)` builds a new string from `func(index, char)`.
- `iter_chars(seq, func)` calls `func(index, item)` on each item of a mutable
  sequence. When `func` returns something other than `None`, that value
  replaces the item.

### `rtmath.buffers`

Helpers for `bytearray` buffers and NUL-terminated byte strings:

- `str_len`, `mem_set`, `zero`, `alloc_zeroed`, `mem_copy`,
  `mem_move(buf, dst, src, length)`, `mem_find`, `mem_compare` and
  `duplicate`.
- `copy_bounded` and `concat_bounded`, in the strlcpy/strlcat style: they
  return the length they tried to create.

Lengths that overrun a buffer raise `ValueError`.

### `rtmath.output`

`put_char`, `put_str`, `put_endl` and `put_number` write directly to a file
descriptor with `os.write`.

- Strings are encoded as UTF-8.
- `None` given to `put_str` or `put_endl` writes nothing.

### `rtmath.lines`

`LineReader(stream, buffer_size=2000)` reads from a file descriptor, or from
any object with a `read(size)` method that returns `str` or `bytes`.

- `readline()` returns the next line with its trailing newline. The last
  line may lack one.
- `readline()` returns `None` at the end of the stream.
- Iterating over the reader yields the same lines.

## Example

```python
from rtmath.vector import Vector
from rtmath.matrix import Matrix4

v = Vector(1.0, 2.0, 2.0, 0.0)
print(v.modulus())          # 3.0
print(v.unit())

m = Matrix4.identity()
print((m @ m).det())        # 1.0
```

## What this package does not do

This package is math and utility code only. It has no command-line program.
It does not parse scene files. It does not trace rays, shade or render
images, and it does not open a window or handle keyboard and mouse input.

## Running the tests

```
pip install -e .[test]
pytest
```