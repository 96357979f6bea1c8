# plainyaml

`plainyaml` reads and writes a simple, line-oriented subset of YAML. It handles
block maps, block arrays, plain and quoted scalars, and comments. Comments,
quote styles and blank lines are kept in the tree. A file that is loaded and
then saved therefore comes back close to how it was written. Every value is
stored as a string. The cursor converts a value to an integer or a boolean
when you ask for one.

## Installing

```
pip install .
```

To install and run the test suite:

```
pip install ".[test]"
pytest
```

## Reading a document

```python
from plainyaml.document import YamlDocument

doc = YamlDocument()
doc.load_string("config", """
# server settings
server:
  host: localhost
  port: 8080
  debug: yes
paths:
  - /var/data
  - "/tmp/cache"
""")

doc["server"]["host"].val_str()   # "localhost"
doc["server"]["port"].val_int()   # 8080
doc["server"]["debug"].val_bool() # True
doc["paths"].size()               # 2
doc["paths"][1].val_str()         # "/tmp/cache"
doc["missing"].is_null()          # True
```

The first argument of `load_string` is a name. It appears only in messages.
`load_file(path)` reads a UTF-8 file and uses the path as that name.

A `Cursor` (from `plainyaml.cursor`) never raises when you index it with a
missing key or an out-of-range index. It returns a null cursor, and
`is_null()` tells you when that has happened.

The kind of node a cursor points at is reported by `is_map()`, `is_array()`,
`is_value()` and `is_undefined()`. For a map, `keys()` and `has_key(key)` are
available. For an array, `size()` gives the length, and it returns -1 when the
cursor is not on an array.

`val_int()` accepts only a plain 32-bit decimal integer. `val_bool()` accepts
`yes`, `no`, `true` and `false`, in any letter case. Both raise `YamlError`
for any other value. On a null cursor they return `0`, `False` and `""`
respectively.

Lines the parser cannot place in the tree are skipped with a logged warning.
An example is a `- key:` line with no value. The places of these lines are kept
in `doc.skipped_lines` as `PlaceInFile` records, each with a filename, a
zero-based line number and the line text.

## Changing and saving

```python
doc["server"]["port"].set_val(9090)
doc["server"]["debug"].set_val(False)   # stored as "no"
doc["server"].set_comment("edited")

text = doc.dump()                       # always ends with a newline
doc.save_file("config.yaml")
```

`set_val` takes a string, an integer or a boolean. A boolean is written as
`yes` or `no`. `clear()` empties the document and leaves an empty root map.

## Building a tree by hand

`YamlNode` (from `plainyaml.node`) is the tree under the cursor. The root is
`doc.root`, and it is also `doc.cursor().node`.

- Map operations: `set_element_value`, `create_element_map`,
  `create_element_array`, `get_element`, `has_element`, `remove_element`,
  `keys`.
- Array operations: `append_element_value`, `append_map`, `element_at`,
  `remove_element_at`, `length`.

Quoting of names and values is chosen with `QuoteStyle.NONE`, `DOUBLE` or
`SINGLE`. `to_string()` renders a node and everything below it.

```python
from plainyaml.node import QuoteStyle

root = doc.root
root.create_element_array("tags")
tags = root.get_element("tags")
tags.append_element_value("alpha")
tags.append_element_value("beta", QuoteStyle.DOUBLE)
item = tags.append_map()
item.set_element_value("name", "gamma")
```

## Errors

- `YamlParseError` (from `plainyaml.line`) is raised for a line that cannot be
  parsed. Examples are an unterminated quoted string, a bare value outside an
  array item, or an indent that does not match any enclosing level.
- `YamlError` (from `plainyaml.node`) is raised when a node is used as the
  wrong kind. Examples are map operations on an array, reading the value of a
  map, or adding a key that already exists. `YamlParseError` is a subclass of
  it.

## What it does not do

- It has no command-line program. It is a library only.
- Flow collections (`[a, b]`, `{a: 1}`) are not supported.
- Multi-line and block scalars (`|`, `>`) are not supported.
- Anchors, aliases, tags and multiple documents are not supported.
- Values are not typed automatically. Conversion happens only through
  `val_int()` and `val_bool()`.