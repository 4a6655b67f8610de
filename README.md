# hoptrace

`hoptrace` shows the route IPv4 packets take to a host. For each hop it sends
UDP probes with a growing time-to-live. It waits for an ICMP reply to each
probe and prints the address that answered and the round-trip time of each
probe.

## Installation

```
pip install .
```

Receiving ICMP needs a raw socket. That usually means running as root or
granting the `CAP_NET_RAW` capability to the Python interpreter. If a socket
cannot be opened, the error is printed and the command exits with the error's
`errno` value.

## Usage

```
hoptrace [OPTION...] HOST
```

Example output:

```
traceroute to example.com (93.184.215.14), 64 hops max
  1   192.168.1.1  0.512ms  0.431ms  0.402ms
  2   *  *  *
  3   10.0.0.1  4.120ms  3.998ms  4.011ms
```

A `*` marks a probe that got no reply within the wait time. The address of a
hop is printed once, from the first probe that got a reply. The trace stops
when the destination itself replies, or when the time-to-live reaches the hop
limit (so the last hop probed is one below the limit).

### Options

| Option                    | Meaning                                          | Default |
|---------------------------|--------------------------------------------------|---------|
| `-f`, `--first-hop NUM`   | initial hop distance (time-to-live)              | 1       |
| `-m`, `--max-hop NUM`     | accepted, but the hop limit stays at 64          | 64      |
| `-p`, `--port PORT`       | destination port of the first probe (0-65535)    | 33434   |
| `-q`, `--tries NUM`       | probe packets per hop (at most 10)               | 3       |
| `-w`, `--wait NUM`        | seconds to wait for each response                | 2       |
| `--resolve-hostnames`     | also print the name of each hop in parentheses   | off     |
| `-V`, `--version`         | print the version and exit                       |         |
| `-h`, `--help`            | show the help text and exit                      |         |

Each hop uses the next destination port, starting from `--port`. Numbers are
decimal; a value that is not a number or is too large is rejected. The
`--first-hop` value is kept in a single byte. If several hosts are given, the
last one is traced.

### Exit status

- `0` after a trace has run,
- `1` when no arguments are given (nothing is printed) or the host cannot be
  resolved,
- `64` when the options are invalid,
- the `errno` of a socket error otherwise.

## Library use

The pieces of the tool can also be used from Python:

- `hoptrace.options.parse_args(argv)` turns a command line (without the
  program name) into a `TraceOptions`, raising `OptionError` on bad input.
  `hoptrace.options.parse_ulong(arg, maximum)` parses one numeric value.
- `hoptrace.host.resolve_host(name)` looks up a host's IPv4 address;
  `numeric_host(address)` and `reverse_host(address)` format an address as a
  number or a name. They raise `HostResolutionError` on failure.
- `hoptrace.report` holds the output formatting: `elapsed_ms`, `format_time`,
  `format_hop_index` and `format_start_message`.
- `hoptrace.tracer.Tracer(options, address)` runs the trace. It is a context
  manager that opens and closes the probe and reply sockets (sockets can also
  be passed in). `send_probe(ttl)` sends one probe and returns a
  `ProbeResult` with the replying address (or `None`) and the elapsed time;
  `run(out)` writes the hop lines to a text stream and returns `True` if the
  destination answered.

```python
import sys
from hoptrace.host import resolve_host
from hoptrace.options import parse_args
from hoptrace.tracer import Tracer

options = parse_args(["-q", "1", "example.com"])
with Tracer(options, resolve_host(options.hostname)) as tracer:
    tracer.run(sys.stdout)
```

## Limitations

- Only IPv4 and UDP probes are supported.
- Any ICMP packet that arrives while waiting counts as the reply to the
  current probe; its type and contents are not checked.
- The hop limit cannot be changed from the command line.

## Running the tests

```
pip install .[test]
pytest
```