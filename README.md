# nxparse

Typed Python models for the JSON documents that the NX-API `cli_show`
interface of Nexus switches returns. Each supported command has a set of
dataclasses and two parsing functions. One parses the full `ins_api`
envelope and the other parses a bare `output` result object.

## Installation

    pip install nxparse

## Supported commands

| Command                       | Module                                 | Full response                        | Result only                                 |
|-------------------------------|----------------------------------------|--------------------------------------|---------------------------------------------|
| `show module`                 | `nxparse.show_module`                  | `parse_show_module`                  | `parse_show_module_result`                  |
| `show version`                | `nxparse.show_version`                 | `parse_show_version`                 | `parse_show_version_result`                 |
| `show ntp peer-status`        | `nxparse.show_ntp_peer_status`         | `parse_show_ntp_peer_status`         | `parse_show_ntp_peer_status_result`         |
| `show port-security address`  | `nxparse.show_port_security_address`   | `parse_show_port_security_address`   | `parse_show_port_security_address_result`   |
| `show system resources`       | `nxparse.show_system_resources`        | `parse_show_system_resources`        | `parse_show_system_resources_result`        |
| `show vpc`                    | `nxparse.show_vpc`                     | `parse_show_vpc`                     | `parse_show_vpc_result`                     |
| `show isis <tag> adj detail`  | `nxparse.show_isis_adj_detail`         | `parse_show_isis_adj_detail`         | `parse_show_isis_adj_detail_result`         |

Each full-response parser returns a `...Response` dataclass. Its `output`
holds the command result, and it also carries the envelope's `sid`, `type`
and `version`. A result dataclass holds the parsed body together with `code`,
`input` and `msg`.

Every parser accepts a `str`, `bytes` or a readable file object. The
following inputs raise `nxparse.decode.ParseError`, which is a subclass of
`ValueError`:

- empty input
- malformed JSON
- a document that is not a JSON object
- a value that cannot be converted to its field's type

## Example

```python
from nxparse.show_ntp_peer_status import parse_show_ntp_peer_status

with open("resp.show.ntp.peer-status.json", "rb") as fh:
    response = parse_show_ntp_peer_status(fh)

for peer in response.flat():
    print(peer.remote, peer.st, peer.vrf)
```

## Decoding rules

NX-API sends a table with a single row as a bare object, not as a list. It
also often sends numbers and booleans as strings. The helpers in
`nxparse.decode` handle both cases:

- `as_list` turns a single object into a one-item list.
- `to_int`, `to_float`, `to_str` and `to_bool` convert values. A missing
  value, an empty string or an empty object becomes `0`, `0.0`, `""` or
  `False`.

As a result, table fields are always lists, and numeric fields hold real
`int` and `float` values.

Some results also have a `flat()` method, which returns a list of plain
records:

- **NTP peer status** returns copies of every peer row as `NtpPeer` records.
- **Port-security address** returns copies of every address entry as
  `PortSecurityAddress` records.
- **IS-IS adjacency detail** returns one `IsisAdjacencyFlat` per adjacency.
  Each record joins the adjacency with its VRF's name and flags, and leaves
  out the adjacency SIDs.

In IS-IS results, `hold_time` and `flap_time` are `datetime.timedelta`
values. They are read from any of these forms:

- a number of seconds
- `MM:SS` or `HH:MM:SS`
- unit groups such as `1d02h`
- `never` or `N/A`, which read as zero

## Value types

- `nxparse.timestamp.TimeStamp` is an `int` that holds seconds since the
  epoch in UTC. `parse_timestamp` reads `"11/04/2019 22:13:33"`,
  `"11/04/2019"` and `"Mon Nov 04 22:13:33 2019"`. A text of any other
  length gives zero. `from_time` builds a timestamp from a `datetime`, and a
  naive `datetime` is taken as UTC. `to_datetime()` returns an aware UTC
  `datetime`. `str()` gives `MM/DD/YYYY HH:MM:SS`, or an empty string for
  zero. The time fields of `show version` use this type.
- `nxparse.watts.Watts` is a single-precision power reading. `parse_watts`
  reads `"120 W"` and `"N/A"`, where `"N/A"` becomes NaN. Any other text
  raises `ValueError`. `str()` gives the shortest form followed by `" W"`, or
  `"N/A"` for NaN.

## What the package does not do

The package only parses documents that you already have. It does not connect
to a switch or send commands, and it has no command-line tool.

## Running the tests

    pip install -e .[test]
    pytest