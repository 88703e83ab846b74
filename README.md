# promkit

Building blocks for monitoring tools: label names and values, label sets and
metrics with their 64-bit FNV-1a fingerprints, alerts and silences with
validation, millisecond timestamps and compact durations (`1w2d3h`), leveled
key/value logging in logfmt or JSON, command-line flags for the logger, and a
WSGI app that serves static files.

## Installation

```
pip install promkit
```

## Labels, metrics and fingerprints

```python
from promkit.labelset import LabelSet
from promkit.metric import Metric, is_valid_metric_name
from promkit.signature import labels_to_signature, signature_for_labels

ls = LabelSet({"foo": "bar", "monitor": "codelab"})
ls.validate()                      # raises ValueError on bad names or values
print(ls)                          # {foo="bar", monitor="codelab"}
print(ls.fingerprint())            # 16 hex digits
ls.fast_fingerprint()              # cheaper, order-independent, more collisions

m = Metric({"__name__": "up", "job": "node"})
print(m)                           # up{job="node"}
is_valid_metric_name("http_requests:rate5m")   # True

labels_to_signature({"a": "b"})
signature_for_labels(m, "job")     # signature over the named labels only
```

`LabelSet.from_json()` decodes a JSON object and rejects invalid label names.
`LabelSet` also has `equal()`, `before()`, `clone()` and `merge()`.

`promkit.labels` defines `LabelName` (with `is_valid()`, `from_json()`,
`from_yaml()`), `LabelValue`, the orderable `LabelPair`, and constants such as
`METRIC_NAME_LABEL` and `ALERT_NAME_LABEL`. `promkit.fingerprinting` has
`Fingerprint`, `parse_fingerprint()`, `fingerprint_from_string()` and
`FingerprintSet` with `equal()` and `intersection()`. The raw hash functions
are in `promkit.fnv` (`new_hash`, `hash_add`, `hash_add_byte`).

## Alerts and silences

```python
from datetime import datetime, timezone
from promkit.alert import Alert, Alerts, sort_alerts
from promkit.labelset import LabelSet

alert = Alert(labels=LabelSet({"alertname": "DiskFull"}),
              starts_at=datetime.now(timezone.utc))
alert.validate()                   # raises ValueError if inconsistent
print(alert.status())              # firing
print(alert)                       # DiskFull[<7 hex digits>][active]

Alerts([alert]).has_firing()       # True
```

`sort_alerts()` orders a list in place by start time, end time and
fingerprint.

`promkit.silence` provides `Matcher` (literal or regular-expression match on a
label, with `validate()` and `from_json()`) and `Silence`, whose `validate()`
checks the matchers, the times, the creator and the comment.

## Time and durations

```python
from promkit.times import Time, Duration, parse_duration

d = parse_duration("3w2d1h")
print(d)                           # 23d1h
d.to_timedelta()
Duration.from_json('"5m"')

t = Time.from_unix(1136239445)
print(t.to_json())                 # 1136239445
Time.from_json("-0.001")           # Time(-1)
```

A year counts as 365 days, a week as 7 days and a day as 24 hours. Durations
too large for a signed 64-bit count of nanoseconds raise `ValueError`.

## Logging

```python
import sys
from promkit.promlog import Config, AllowedLevel, AllowedFormat, new, new_dynamic

logger = new(Config(level=AllowedLevel("info")), sys.stderr)
logger.info("msg", "started")      # ts=... caller=... level=info msg=started
logger.debug("msg", "hidden")      # filtered out

dyn = new_dynamic(Config(format=AllowedFormat("json")))
dyn.set_level(AllowedLevel("debug"))
```

Output goes to standard error unless a stream is given. `AllowedLevel`
accepts `debug`, `info`, `warn` and `error`; `AllowedFormat` accepts `logfmt`
and `json`.

`promkit.logflags.add_flags(parser, config)` adds `--log.level` (default
`info`) and `--log.format` (default `logfmt`) to an
`argparse.ArgumentParser`, storing the choices into a `Config`.

## Version information

`promkit.version` holds build fields (`VERSION`, `REVISION`, `BRANCH`,
`BUILD_USER`, `BUILD_DATE`) and formats them with `print_version(program)`,
`info()` and `build_context()`.

## Static files

```python
from wsgiref.simple_server import make_server
from promkit.static import static_file_server

app = static_file_server("public")
make_server("localhost", 8000, app).serve_forever()
```

The app serves files and directory listings under the given root, and sets
`Content-Type` explicitly for `.js`, `.css`, `.png`, `.jpg` and `.gif`.

## What it does not include

There are no query-result value types (samples, vectors, matrices, scalars)
or their JSON encoding, no `Accept` header content negotiation, and no URL
router with path parameters or prefixes. The package runs no server of its
own; the static file app has to be mounted in a WSGI server such as
`wsgiref`.

## Running the tests

```
pip install -e .[test]
pytest
```