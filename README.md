# ftkit

Small helpers for characters, byte buffers and strings, conversion between
decimal text and 32-bit integers, and a minimal `printf` with a fixed set of
conversions. There are no dependencies outside the standard library.

## Install

```
pip install ftkit
pip install "ftkit[test]"   # adds pytest, to run the tests
```

## Modules

### `ftkit.chars`

`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`.
Each takes either an int character code or a one-character string. The
`is*` functions return a `bool` and look only at the ASCII range.
`toupper` and `tolower` change only ASCII letters and return a value of the
same type as their argument (`toupper("a") == "A"`, `toupper(97) == 65`).

### `ftkit.memory`

Operations on `bytearray` (and, for reading, `bytes`) buffers:

- `memset(buf, ch, n)` fills the first `n` bytes with `ch & 0xFF` and returns `buf`.
- `bzero(buf, n)` zeroes the first `n` bytes.
- `memcpy(dst, src, n)` copies `n` bytes from `src` to the start of `dst`.
- `memmove(buf, dst, src, n)` copies `n` bytes inside `buf` between offsets;
  the regions may overlap.
- `memchr(buf, ch, n)` returns the index of the first matching byte among
  the first `n`, or `None`.
- `memcmp(b1, b2, n)` returns the difference of the first differing bytes, or 0.
- `calloc(count, size)` returns a zero-filled `bytearray` of `count * size`
  bytes and raises `OverflowError` if that would not fit in 64 bits.

A negative count raises `ValueError`; a range outside a buffer raises `IndexError`.

### `ftkit.strings`

- `strlen(s)`: the length of a `str`, or the number of bytes before the first
  NUL in `bytes`/`bytearray`.
- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)`: bounded copying and
  appending of NUL-terminated byte strings into a `bytearray`. They return the
  length of the string they tried to build.
- `strchr(s, c)`, `strrchr(s, c)`: index of the first or last occurrence of a
  character in a `str`, or `None`. Searching for NUL returns `len(s)`.
- `strncmp(s1, s2, n)`: compares at most `n` characters and returns 0 or the
  difference of the character codes at the first mismatch.
- `strnstr(haystack, needle, length)`: index of the first `needle` lying
  wholly within the first `length` characters, or `None`. An empty needle is
  found at 0.

### `ftkit.transform`

- `strdup(s)`, `strjoin(s1, s2)`, `substr(s, start, length)`.
- `strtrim(s, charset)` strips characters in `charset` from both ends.
- `split(s, sep)` splits on a single character and drops empty pieces:
  `split("xxabcxxbcxxaaa", "x") == ["abc", "bc", "aaa"]`.
- `strmapi(s, f)` builds a string from `f(index, char)`.
- `striteri(buf, f)` replaces each element of a mutable sequence in place
  with `f(index, element)`, stopping at the first NUL element.

### `ftkit.numbers`

- `atoi(s)` parses like the C library's `atoi`: leading whitespace, one
  optional sign, digits up to the first non-digit. Text with no number gives
  0. A value beyond the 64-bit signed range gives -1 when positive and 0 when
  negative; other values are reduced to a 32-bit signed int.
- `itoa(n)` returns the decimal text of `n` and raises `OverflowError` if it
  does not fit in a 32-bit signed int.

### `ftkit.output`

`putchar(c, stream=None)`, `putstr(s, stream=None)`, `putendl(s, stream=None)`
and `putnbr(n, stream=None)` write to a text stream, standard output by
default. `putstr` and `putendl` write nothing for `None`; `putchar` truncates
an int to a byte.

### `ftkit.printf`

`format_conversion(spec, arg)`, `format_string(fmt, *args)`,
`printf(fmt, *args, stream=None)` and the exception `FormatError` (a
subclass of `ValueError`).

| spec | meaning |
|------|---------|
| `%c` | a one-character string, or an int truncated to a byte |
| `%s` | a string; `None` prints `(null)` |
| `%p` | `0x` and lower-case hex of an int (64 bits); `None` is `0x0`, any other object uses its `id()` |
| `%d`, `%i` | an int reduced to signed 32 bits |
| `%u` | an int reduced to unsigned 32 bits |
| `%x`, `%X` | an int reduced to unsigned 32 bits, in lower- or upper-case hex |
| `%%` | a literal percent sign |

Any other character after `%`, or a conversion with no argument left, raises
`FormatError`. A `%` at the very end of the format is dropped, extra
arguments are ignored, and the format ends at its first NUL character.

```python
import io
from ftkit.printf import format_string, printf

format_string("%s is %d (%x)", "answer", 42, 42)   # 'answer is 42 (2a)'

out = io.StringIO()
count = printf("%c%c%%\n", "o", "k", stream=out)
# out.getvalue() == 'ok%\n', count == 4
```

`printf` returns the number of characters written. If it raises
`FormatError`, the text before the faulty conversion has already been written.

## What it does not do

This is a library only; it installs no command. The `printf` here has no
flags, field widths, precision or length modifiers, and no floating-point
conversions.

## Tests

```
pytest
```