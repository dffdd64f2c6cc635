# kbase

A collection of small, dependency-free utilities for Python programs.

## Installation

```
pip install kbase
```

To run the test suite, install the test extra and run pytest:

```
pip install "kbase[test]"
pytest
```

## What is inside

| Module | Provides |
| --- | --- |
| `kbase.string_view` | `StringView`, a view onto part of a string with `at`, `substr`, `compare`, `find`, `rfind`, `find_first_of`, `find_last_of`, `find_first_not_of`, `find_last_not_of`; searches return `NPOS` (-1) when nothing matches. Also `hash_byte_sequence`, the 64-bit FNV-1a hash of a byte sequence |
| `kbase.auto_reset` | `AutoReset`, a context manager that remembers an attribute (or a mapping entry) and puts its original value back when the block ends |
| `kbase.scope_guard` | `ScopeGuard`, a context manager that runs a callback when the block is left, unless `dismiss()` was called |
| `kbase.lazy` | `Lazy`, builds its value with a creator on the first call to `value()`, exactly once even across threads |
| `kbase.endian` | `host_to_network` / `network_to_host` for 16, 32 and 64-bit integers, signed or unsigned |
| `kbase.pickle` | `Pickle` and `PickleReader`, a compact binary format with a 4-byte size header and 4-byte aligned segments; integers, floats, booleans, strings, wide strings, raw bytes and lists |
| `kbase.string_format` | `string_format` with `{index:spec}` placeholders, `analyze_format`, `string_printf`, `string_append_printf`, `Placeholder` and `FormatError` |
| `kbase.encoding` | `wide_to_utf8`, `utf8_to_wide`, `ascii_to_wide`, `wide_to_ascii` |
| `kbase.lru_cache` | `LRUCache`, ordered from least to most recently used, with optional automatic eviction when `max_size` is non-zero |
| `kbase.scoped_handle` | `ScopedHandle`, `ScopedFD` (file descriptors, -1 is null) and `ScopedFileHandle` (file objects), which close what they own on `reset()` or when the block ends |
| `kbase.stack_walker` | `StackWalker`, snapshots up to 64 frames of the current call stack and writes them out, innermost first |
| `kbase.environment` | `Environment`, static helpers to get, test, set and remove environment variables, and list them sorted by name |
| `kbase.eintr` | `handle_eintr` retries a call while it raises `InterruptedError`; `ignore_eintr` returns 0 instead |

## Examples

Formatting with indexed placeholders. A spec may hold, in this order, a fill
character with `<` or `>`, `+`, a width, `.precision` and one of `b x X o e E`:

```python
from kbase.string_format import string_format

string_format("{0} has {1:0>4} items, {0}!", "box", 7)
# 'box has 0007 items, box!'
```

An LRU cache that evicts the least recently used entry:

```python
from kbase.lru_cache import LRUCache

cache = LRUCache(2)
cache.put("a", 1)
cache.put("b", 2)
cache.get("a")
cache.put("c", 3)   # evicts "b"
"b" in cache        # False
```

Binary serialization:

```python
from kbase.pickle import Pickle, PickleReader

pickle = Pickle()
pickle.write_int32(7)
pickle.write_string("hello")

reader = PickleReader(pickle)
reader.read_int32()    # 7
reader.read_string()   # 'hello'
```

Cleanup on scope exit:

```python
from kbase.scope_guard import ScopeGuard

with ScopeGuard(lambda: print("cleaned up")) as guard:
    ...
```

## What it does not do

kbase is a library only: it has no command-line tool. It offers no
signal/slot or other event-dispatch facility, and no access to platform
services such as a registry, debugger or system path lookup.