# oximod

Building blocks for describing MongoDB documents in Python: one shared
`pymongo` client for the whole process, field declarations with defaults,
validation rules checked against field values, and index definitions that
turn into `pymongo` index models.

## Installation

```
pip install oximod
```

The only runtime dependency is `pymongo`.

## The shared client (`oximod.client`)

```python
from oximod.client import set_global_client, get_global_client

set_global_client("mongodb://localhost:27017")
client = get_global_client()          # a pymongo.MongoClient
users = client["test"]["users"]
```

- `set_global_client(mongo_uri)` creates a `MongoClient` for the URI and
  installs it for the process. It may be called only once: a second call
  closes the new client and raises `GlobalClientInitError`. A URI the
  driver rejects raises `DatabaseConnectionError`.
- `get_global_client()` returns the installed client, or raises
  `GlobalClientMissingError` if none has been set.

## Errors (`oximod.errors`)

Every error derives from `OximodError`, and its message carries a fixed
prefix:

| Class                      | Message                                  |
|----------------------------|------------------------------------------|
| `DatabaseConnectionError`  | `Failed to connect to db: <detail>`      |
| `GlobalClientInitError`    | `Failed to set CLIENT`                   |
| `GlobalClientMissingError` | `CLIENT not found: <detail>`             |
| `SerializationError`       | `Serialization error: <detail>`          |
| `AggregationError`         | `Aggregation error: <detail>`            |
| `IndexCreationError`       | `Index error: <detail>`                  |
| `ValidationError`          | `Validation error: <detail>`             |

`DatabaseConnectionError` is also a built-in `ConnectionError`.

`attach_printables(error, suggestion=None)` prints the current call stack
and, if given, the suggestion to standard error, stores the suggestion on
the error as `error.suggestion`, and returns the error, so it can be used
as `raise attach_printables(SomeError("..."), "Try this.")`.

## Index definitions (`oximod.indexes`)

`Index` describes how one field is indexed: `unique`, `sparse`, `name`,
`background`, `order` (1 ascending, -1 descending; an integer or a string
holding one, default 1) and `expire_after_secs` for a TTL index.

```python
from oximod.indexes import Index

model = Index(unique=True, name="name_idx").to_index_model("name")
Index(sparse=True, order="-1").to_index_model("age")
Index(expire_after_secs=3600).to_index_model("created_at")
```

`to_index_model(field_name)` returns a `pymongo.IndexModel`; options left
unset are not passed. A non-numeric `order` string raises `ValueError`;
values of the wrong type raise `TypeError`.

## Validation rules (`oximod.validation`)

`Validate` holds the rules for one field: `min_length`, `max_length`,
`required`, `email`, `pattern`, `non_empty`, `positive`, `negative`,
`non_negative`, `min` and `max`.

```python
from oximod.validation import Validate
from oximod.errors import ValidationError

rule = Validate(min_length=5, max_length=10)
rule.check("name", "Valid")           # returns "Valid"
rule.check("name", "abc")             # raises ValidationError
```

`check(field_name, value)` returns the value when every rule holds and
otherwise raises `ValidationError` for the first rule broken, with messages
such as `Field 'name' must be at least 5 characters long`,
`Field 'email' must be a valid email address`, `Field 'role' is required`
or `Field 'code' does not match the required pattern`. String lengths are
counted in UTF-8 bytes. Apart from `required` and `non_empty`, rules let a
`None` value through.

## Field declarations (`oximod.fields`)

`field(*, default=..., default_factory=None, index=None, validate=None)`
returns a `Field` that bundles a default, an index and validation rules for
one attribute:

```python
from oximod.fields import field
from oximod.indexes import Index
from oximod.validation import Validate

name = field(default="Anonymous", validate=Validate(min_length=3))
email = field(index=Index(unique=True), validate=Validate(email=True))
tags = field(default_factory=list)
age = field(default=18, index=True)   # index=True: ascending, default options

email.check("email", "user@example.com")
email.index_model("email")            # pymongo.IndexModel or None
tags.make_default()                   # a fresh []
```

A field may give `default` or `default_factory` but not both; a list, dict,
set or bytearray as `default` is refused in favour of `default_factory`.
`has_default` tells whether a default is declared, and `make_default()`
raises `LookupError` when it is not.

## What this package does not do

There is no model base class here: nothing saves, finds, updates, deletes,
counts or aggregates documents for you, and nothing applies the declared
fields, indexes or validation rules to a collection automatically. Those
operations are done directly on the `pymongo` client returned by
`get_global_client()`, using `Field`, `Index` and `Validate` as the
descriptions to act on. The package also installs no command-line program.

## Running the tests

```
pip install "oximod[test]"
pytest
```