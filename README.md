# depwatch

A library for keeping an eye on the changelogs of the dependencies a project
relies on: load a watch list from YAML, shape changelog entries through small
stages, build a plain-text digest and deliver it to Slack or by e-mail.

## Installation

```
pip install depwatch
```

For running the test suite:

```
pip install "depwatch[test]"
pytest
```

## Configuration

`depwatch.config.load(path)` reads a YAML file and returns a `Config`:

```yaml
check_interval: 12h
dependencies:
  - name: react
    ecosystem: npm
    version: "18.0.0"
notifiers:
  slack:
    webhook_url: https://hooks.example.com/placeholder
    channel: "#deps"
  email:
    smtp_host: smtp.example.com
    smtp_port: 587
    from: depwatch@example.com
    to: [team@example.com]
```

At least one dependency is required, each with a name and an ecosystem.
`check_interval` takes durations such as `12h` or `1h30m` (see
`depwatch.config.parse_duration`) and defaults to 24 hours. The `from` key
ends up in `EmailConfig.from_addr`. Any problem reading, parsing or
validating the file raises `ConfigError`.

## Changelog entries and stages

Entries are `depwatch.changelog.transform.Entry` dataclasses with
`dependency`, `version`, `date` (`None` when unknown), `body`, `tags`,
`labels` and `score`. Each stage below is a class in its own module under
`depwatch.changelog` with an `apply(entries)` method that returns a new list
and leaves the input entries unchanged:

- `semver_filter.SemVerFilter(min_version, max_version)` keeps versions within
  an inclusive range; entries whose version does not parse are kept.
- `window.Window(start, end)` keeps entries dated within `[start, end)`;
  a start not before the end raises `InvalidWindowError`.
- `sorter.Sorter(SortOrder.DESCENDING | SortOrder.ASCENDING)` orders by date,
  undated entries last.
- `truncator.Truncator(max_per_dep)` caps entries per dependency.
- `sanitizer.Sanitizer(max_runes)` normalises line endings, strips control
  characters and optionally truncates bodies.
- `summarizer.Summarizer(max_runes)` flattens bodies to a one-line preview,
  adding `…` when cut.
- `tagger.Tagger(rules)` adds tags from keyword rules (`add_rule(tag, *keywords)`).
- `staler.Staler(threshold)` tags entries older than a `timedelta` as `stale`.
- `suppressor.Suppressor(deps)` drops entries of listed dependencies,
  case-insensitively.
- `scorer.Scorer(keywords)` sets `score` by keyword count, security terms
  counting double; `score(entry)` scores a single entry.

Other helpers return groupings rather than lists:

- `trending.Trending(top_n).analyse(entries)` ranks dependencies by total
  score, then entry count, as `TrendingEntry` values.
- `router.Router(rules, fallback).route(entries)` maps channel names to
  entries by `(label, channel)` rules; unmatched entries go to `"default"`.
- `splitter.Splitter().split(entries)` groups by dependency; `keys(entries)`
  lists dependencies in first-seen order.

`depwatch.changelog.transform` also offers `Transformer` objects with a
`transform(entries)` method: `LimitTransformer(n)` caps the total,
`TransformFunc(callable)` adapts any function, and `Chain(*steps)` runs
transformers in order. Stages join a chain through `TransformFunc`:

```python
from depwatch.changelog.sorter import Sorter, SortOrder
from depwatch.changelog.transform import Chain, LimitTransformer, TransformFunc

chain = Chain(TransformFunc(Sorter(SortOrder.DESCENDING).apply), LimitTransformer(5))
latest = chain.transform(entries)
```

`depwatch.changelog.version.parse_version` parses `v1.2.3` or `1.2.3-beta`
into a `Version`, raising `VersionError` otherwise.
`depwatch.changelog.source.Source` describes an HTTP or GitHub changelog
source; `validate()` raises a `SourceError` subclass when it is incomplete.

## Digests and delivery

`depwatch.digest.Builder().build(updates)` turns a mapping of dependency name
to entries into a `Digest`, and `Digest.format_text()` renders it.

- `depwatch.notifier.email_notifier.EmailNotifier(host, port, username,
  password, from_addr, to)` sends plain-text mail over SMTP, using STARTTLS
  when the server offers it and logging in only when a username is given.
- `depwatch.notifier.slack.SlackNotifier(webhook_url)` posts a message with
  `send(message)`.
- `depwatch.notifier.multi.MultiNotifier(*notifiers)` calls `send(subject,
  body)` on every `Notifier` and raises one `NotifierError` listing all
  failures. `SlackNotifier.send` takes a single message, so it is not a
  `Notifier` and cannot be added to a `MultiNotifier` directly.

Delivery failures raise `NotifierError`.

## Supporting pieces

- `depwatch.store.Store(path)` remembers the last version seen per dependency
  in a JSON file (`last_seen`, `set_last_seen`).
- `depwatch.scheduler.Scheduler(interval, job)` runs a job immediately and
  then at a fixed interval until the `threading.Event` passed to `run` is set;
  job errors are logged.
- `depwatch.changelog.retry.retry(fn, config, cancel)` retries a call with
  exponential backoff; raise `permanent(err)` to stop at once.
- `depwatch.changelog.throttle.Throttle(min_delay)` limits how often a key is
  allowed through.
- `depwatch.changelog.snapshot.SnapshotStore` keeps the latest entries per
  dependency in memory.

## What it does not do

depwatch does not fetch changelogs over HTTP or from GitHub releases, does not
parse changelog text into entries, and has no watcher loop or command that
ties configuration, fetching and delivery together. You supply the entries and
wire the pieces up yourself.