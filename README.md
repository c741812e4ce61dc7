# commonkit

Building blocks shared by back-end services. There are three parts.

- `commonkit.log` is structured logging that adds values from a request context.
- `commonkit.crontab` is a small command tree for scheduled jobs, built on `argparse`.
- `commonkit.rdb` is one Redis client that works with a single server or with a cluster.

The only runtime dependency is `redis`. Install the `test` extra to run the tests with pytest.

## Logging

`commonkit.log.core` holds one logger for the whole process. Call `init_log`
once with an `Options` value before any other logging call. If you do not,
the logging functions raise `RuntimeError`. `Options` has these fields:

- `filename` (required): the log file.
- `ctx_fields`: context keys whose values are copied into every record.
- `max_count`: how many rotated files to keep.
- `caller_enable`: record the calling file and line.
- `log_level`: the minimum level. Use the module constants `DEBUG`, `INFO`, `WARN`, `ERROR`, `PANIC` and `FATAL`. The default is `INFO`.
- `close_console`: turn off console output.

Any keyword arguments you pass to `init_log` become fields on every entry.

```python
from commonkit.log.core import Options, init_log, infof, warnw, sync

init_log(Options(filename="app.log", ctx_fields=["trace_id"]), service="billing")

ctx = {"trace_id": "abc123"}
infof(ctx, "processed %d orders", 42)
warnw(ctx, "slow upstream", "host", "db-1", "elapsed_ms", 950)
sync()
```

A context is any mapping, or `None`. Keys listed in `ctx_fields` that have a
non-`None` value are added to the record as strings.

Each level has several forms:

- `debug`, `info`, `warn` and `error` take keyword fields.
- `debugw`, `infow`, `warnw` and `errorw` take alternating key/value arguments.
- `debugf`, `infof`, `warnf` and `errorf` take a `%`-style template and its arguments.
- `with_infof(ctx, fields, template, *args)` logs at info level and adds the fields you give as a mapping.
- `fatal` and `fatalf` log, then raise `SystemExit(1)`.
- `panic` and `panicf` log, then raise `RuntimeError` with the message.
- `with_fields(**fields)` returns a `logging.LoggerAdapter` that adds the given fields to every entry.
- `sync()` flushes every output.

Where the output goes:

- The file gets one JSON object per line, with the keys `level`, `timestamp`, `message`, `file` (only when caller information is on) and then the fields.
- The file rotates at midnight. Rotated files are named `<filename>.YYYYMMDD.log`.
- The console gets tab-separated text on standard output.
- Timestamps use the format `YYYY-MM-DD HH:MM:SS` (`TIME_FORMAT`).

### Adapters

- `commonkit.log.writer.safe_writer(ctx)` returns a writable object that can be used as a context manager. A background thread reads what you write. Each line that is not blank is logged at info level. A line longer than `MAX_TOKEN_LENGTH` bytes is logged in chunks of that size (see `scan_lines_or_give_long`). `close()` waits until everything written has been logged.
- `commonkit.log.sql.SqlLogger` filters log calls from a database layer by `LogLevel` (`SILENT`, `ERROR`, `WARN`, `INFO`).
  - `trace(ctx, begin, fc, err)` takes `begin` as a `time.monotonic()` reading, and `fc` as a callable that returns `(sql, rows)`. It logs the error, the elapsed time, the row count and the SQL.
  - A trace is logged at error level when there is an error. `RecordNotFoundError` is left out of this if `ignore_record_not_found_error` is set.
  - A trace is logged at warn level when it took longer than `slow_threshold` seconds. Otherwise it is logged at info level.
  - `log_mode(level)` returns a copy with a new level.
- `commonkit.log.es.EsLogger` logs the body of an outgoing request one line at a time, when `request_enabled` is set. It reads the body from `request.body`, which can be bytes, a string or a readable stream; a seekable stream is rewound afterwards. Read errors are logged and never raised.

## Scheduled-task commands

`commonkit.crontab.root.new()` creates the root parser the first time it is
called and returns it. The root parser has these global options, and every
sub-command accepts them too:

- `-d/--date`
- `-f/--date-flag`, an integer from 0 to 255
- `-a/--app-list`, comma-separated values that add up when the option is repeated
- `-c/--conf`, default `config.yaml`

```python
from commonkit.crontab.root import new, add_command, execute
from commonkit.crontab.runner import ArgType, Flag, Runner

new()

def report(namespace, args):
    print(namespace.date, namespace.limit, args)

add_command(Runner(
    cmd="daily-report",
    remark="build the daily report",
    run=report,
    flags=[Flag(name="limit", short_name="l", type=ArgType.INT, remark="row limit")],
))

execute(["daily-report", "--date", "2024-01-31", "-l", "100", "extra"])
```

Per-command flags come in three kinds:

| Kind | Default |
| --- | --- |
| `ArgType.INT` | `0` |
| `ArgType.STRING` | `""` |
| `ArgType.SLICE` (comma-separated list) | `[]` |

The runner's `run` callable receives the parsed `argparse.Namespace` and the
list of positional arguments.

How `execute` behaves:

- Called without arguments, it reads `sys.argv`.
- If no command is given, it prints help.
- If the command line is not valid, it raises `commonkit.crontab.root.CommandError`.

`add_command` raises `ValueError` for an empty or already registered command
name. Both `add_command` and `execute` raise `RuntimeError` if `new()` has not
been called.

## Redis

```python
from datetime import timedelta

from commonkit.rdb.base import Mode, Options
from commonkit.rdb.client import init_redis
from commonkit.rdb.sortedsets import Z, ZRangeBy

client = init_redis(Options(host=["localhost:6379"], mode=Mode.CLIENT))
client.set("greeting", "hello", 60)
client.expire("greeting", timedelta(minutes=5))
client.hset("user:1", "name", "Ada")
client.zadd("scores", Z(score=10, member="ada"), Z(score=7, member="bob"))
client.zrange_by_score("scores", ZRangeBy(min="5", max="+inf"))
```

`init_redis` builds a `RedisClient`, pings the server, and lets the `redis`
library's exception propagate if the server cannot be reached. It raises
`ValueError` when no host is given.

- With `Mode.CLUSTER`, it connects to a cluster using every `host:port` in `host`.
- With any other mode, it connects to the first address and uses `db`.
- The socket timeout is the larger of `read_timeout` and `write_timeout`, in seconds.
- The connect timeout is 5 seconds.

The client has the same command set in both modes:

- keys: `eval`, `delete`, `expire`, `exists`, `ttl`. `ttl` returns a `timedelta`.
- strings: `set`, `set_nx`, `get`, `mget`, `incr`, `incr_by`, `incr_by_float`, `get_set`, `rename`. An expiration may be seconds or a `timedelta`; zero or less means none.
- lists: `lpop`, `rpop`, `lpush`, `rpush`, `ltrim`
- hashes: `hset`, `hset_nx`, `hmset`, `hget`, `hmget`, `hgetall`, `hdel`, `hexists`, `hlen`, `hincr_by`, `hincr_by_float`, `hscan`, `hkeys`. Field values can be given as alternating arguments, as one flat list, or as a mapping.
- sets: `sadd`, `srem`, `smembers` (returns a `set`), `sismember`, `srandmember`, `scard`
- sorted sets:
  - `zadd`, `zrem`, `zincr_by`, `zscore`, `zrank`, `zrevrank`, `zcard`, `zcount`
  - `zrange`, `zrevrange`, `zrange_with_scores` and `zrevrange_with_scores`; the last two return `Z` values
  - `zrange_by_score` and `zrevrange_by_score`, which take a `ZRangeBy`
- HyperLogLog: `pf_add`, `pf_count`
- Bloom filters (needs the server's bloom module): `bf_add`, `bf_exists`, `bf_card`, `bf_reserve_with_args` (takes `BFReserveOptions`)
- pub/sub: `publish`, `subscribe`. `subscribe` returns the `redis` library's `PubSub` object.

The command groups are separate classes (`KeyCommands`, `StringCommands`,
`HashCommands` and so on) on a shared `RedisBase`. You can build any one of
them directly around an existing `redis` connection.

## What is not included

- The package installs no command-line program. You build your own entry point with `commonkit.crontab.root`.
- The `--conf` option is parsed but no configuration file is read.
- `SqlLogger` and `EsLogger` are not wired into any database driver or HTTP client; you call their methods from your own hooks.
- The Redis client is synchronous only.