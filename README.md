# baselib

Small building blocks in pure Python, with no third-party dependencies:

- **Hash functions** (`baselib.hashing`, `baselib.siphash`): SplitMix64,
  FNV-1a (32/64-bit), MurmurHash3 (x86 32-bit, and a 64-bit hash built on the
  x64 128-bit mixing), SipHash-2-4 (64-bit output) and HalfSipHash-2-4
  (32-bit output).
- **HashMap** (`baselib.hashmap`): a separate-chaining hash map keyed on
  byte strings. It is keyed with SipHash, iterates in insertion order, and
  grows and shrinks with its load factor.
- **ArrayList** (`baselib.arraylist`): a growable list that tracks its
  capacity apart from its length.
- **String key helpers** (`baselib.stringmap`): store and look up text keys
  in a `HashMap` as NUL-terminated UTF-8.
- **Utilities** (`baselib.utils`): `next_pow2` and `align_up`.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
pytest
```

## Hashing

```python
from baselib.hashing import (
    fnv1a_32, fnv1a_64, murmur3_32, murmur3_64, siphash, splitmix64, siphash_init,
)
from baselib.siphash import siphash_64, halfsiphash_32

fnv1a_64(b"hello")
murmur3_32(b"hello", 0)
murmur3_64(b"hello", 0)
k0, k1 = siphash_init(0x123456789ABCDEF0)
siphash(b"hello", k0, k1)
halfsiphash_32(b"hello", 1, 2)
splitmix64(42)
```

`fnv1a`, `murmur3` and `siphash` are the 64-bit variants. `siphash_init_64`,
`siphash_init_32` and `siphash_init` derive a pair of key words from a seed;
both words come from the same SplitMix64 step, so they are equal. Without a
seed, `get_seed()` supplies one from an object address and the clock, so the
keys differ from run to run. `HashFunction` enumerates `FNV1A`, `MURMUR3` and
`SIPHASH`.

## HashMap

```python
from baselib.hashmap import HashMap

m = HashMap(16, 0x123456789ABCDEF0)   # bucket count, seed for the SipHash keys
m.insert(b"never", 1)                 # returns the HashMapEntry
m.insert(b"gonna", 2)

m.find(b"never").value      # 1; find returns None for a missing key
m[b"gonna"]                 # 2; KeyError for a missing key
b"give" in m                # False
len(m)                      # 2

for entry in m:             # insertion order
    print(entry.key, entry.value)
for entry in reversed(m):   # reverse insertion order
    ...

m.remove(b"never")          # True if an entry was removed
m.capacity                  # bucket count, a power of two, at least 16
m.load_factor               # entries per bucket
m.buckets()                 # snapshot of the chains, one tuple per bucket
```

Keys must be bytes-like; any other key raises `TypeError` (and `in` answers
`False`). Inserting a key that is already present replaces its value and moves
the entry to the end of the iteration order.

Before an insertion, a load factor above `max_load_factor` (default 2.0)
doubles the bucket table (`expand()`). Before a removal, a load factor below
`min_load_factor` (default 0.5) halves it, but never below 16 buckets.
`resize(n)` rehashes into `n` buckets rounded up to a power of two.
`get_hash(data, seed)` is the hash the map uses.

## ArrayList

```python
from baselib.arraylist import ArrayList

a = ArrayList(4)            # initial capacity
a.append(1)
a.extend([2, 3, 4, 5])      # capacity grows as needed
a.insert(0, 0)              # IndexError outside 0..len(a)
a.insert_range(1, [7, 8])
a.remove(2)                 # returns the element, or None when out of range
a.remove_range(0, 2)        # returns the removed elements
a.pop()                     # None on an empty list
a.size                      # current capacity
a.reserve(10)               # add slots
a.realloc(3)                # set capacity, dropping elements that no longer fit
a.trim()                    # shrink capacity to the element count
a.copy()
a.clear()
```

A full list grows by one eighth of its capacity, and by at least 4 slots.
Elements can be read and written with `a[i]` and iterated over.

## String keys

```python
from baselib.hashmap import HashMap
from baselib.stringmap import string_key, string_map_insert, string_map_find

m = HashMap(16, 0)
string_map_insert(m, "suite", "HashMap")
string_map_find(m, "suite").value   # "HashMap"
string_key("abc")                   # b"abc\x00"
```

## What it does not do

The hash map always hashes with SipHash; the other hash functions are
available on their own but cannot be selected for a map. Values are ordinary
Python objects, so there is no control over memory layout or alignment. The
package is a library only and provides no command.