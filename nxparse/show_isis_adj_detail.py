"""Decoding of "show isis adjacency detail" output."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from datetime import timedelta
from typing import Any, Callable

from nxparse.decode import (
    Envelope,
    ParseError,
    as_list,
    load_document,
    to_bool,
    to_int,
    to_str,
)

__all__ = [
    "AdjacencySid",
    "IsisAdjacency",
    "IsisVrf",
    "IsisProcessTag",
    "IsisAdjacencyFlat",
    "ShowIsisAdjDetailResult",
    "ShowIsisAdjDetailResponse",
    "parse_show_isis_adj_detail",
    "parse_show_isis_adj_detail_result",
]

_UNIT_SECONDS = {"y": 365 * 86400, "w": 7 * 86400, "d": 86400, "h": 3600, "m": 60, "s": 1}
_UNIT_PART = re.compile(r"(\d+)([ywdhms])")


def _duration(value: Any) -> timedelta:
    """Read a span given as seconds, "[HH:]MM:SS" or unit groups such as "1d02h"."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return timedelta(seconds=value)
    text = to_str(value).strip()
    if not text or text.lower() in ("never", "n/a"):
        return timedelta(0)
    if re.fullmatch(r"\d+(:\d+){1,2}", text):
        seconds = 0
        for part in text.split(":"):
            seconds = seconds * 60 + int(part)
        return timedelta(seconds=seconds)
    if re.fullmatch(r"\d+", text):
        return timedelta(seconds=int(text))
    if re.fullmatch(r"(\d+[ywdhms])+", text):
        return timedelta(
            seconds=sum(int(n) * _UNIT_SECONDS[u] for n, u in _UNIT_PART.findall(text))
        )
    raise ParseError(f"parsing error: cannot convert {value!r} to duration")


def _rows(data: dict, name: str) -> list[dict]:
    return [
        row
        for table in as_list(data.get(f"TABLE_{name}"))
        for row in as_list(table.get(f"ROW_{name}"))
    ]


def _converter(annotation: Any) -> Callable[[Any], Any]:
    return {"str": to_str, "int": to_int, "bool": to_bool, "timedelta": _duration}[
        annotation if isinstance(annotation, str) else annotation.__name__
    ]


@dataclass
class AdjacencySid:
    """A segment identifier attached to an adjacency."""

    value: int = 0
    f_flag: bool = False
    b_flag: bool = False
    v_flag: bool = False
    l_flag: bool = False
    s_flag: bool = False
    p_flag: bool = False
    weight: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AdjacencySid":
        return cls(
            **{
                f.name: _converter(f.type)(data.get("adj-sid-" + f.name.replace("_", "-")))
                for f in fields(cls)
            }
        )


@dataclass
class IsisAdjacency:
    """One IS-IS neighbour with its detail fields."""

    sys_name: str = ""
    sys_id: str = ""
    usage: str = ""
    state: str = ""
    hold_time: timedelta = timedelta(0)
    intf_name: str = ""
    detail_set: bool = False
    transitions: int = 0
    flap: bool = False
    flap_time: timedelta = timedelta(0)
    ckt_type: str = ""
    ipv4_addr: str = ""
    ipv6_addr: str = ""
    bcast: bool = False
    bfd_ipv4_establish: bool = False
    bfd_ipv6_establish: bool = False
    resurrect: bool = False
    restart_capable: bool = False
    restart_ack: bool = False
    restart_mode: bool = False
    restart_adj_seen_ra: bool = False
    restart_adj_seen_csnp: bool = False
    restart_adj_seen_l1_csnp: bool = False
    restart_adj_seen_l2_csnp: bool = False
    restart_suppress_adj: bool = False
    sids: list[AdjacencySid] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IsisAdjacency":
        values: dict[str, Any] = {
            f.name: _converter(f.type)(data.get("adj-" + f.name.replace("_", "-") + "-out"))
            for f in fields(cls)
            if f.name != "sids"
        }
        values["sids"] = [AdjacencySid.from_dict(row) for row in _rows(data, "adj_sid")]
        return cls(**values)


@dataclass
class IsisVrf:
    """Adjacencies of one VRF."""

    vrf_name: str = ""
    adj_summary: bool = False
    adj_interface: bool = False
    adjacencies: list[IsisAdjacency] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IsisVrf":
        return cls(
            vrf_name=to_str(data.get("vrf-name-out")),
            adj_summary=to_bool(data.get("adj-summary-out")),
            adj_interface=to_bool(data.get("adj-interface-out")),
            adjacencies=[IsisAdjacency.from_dict(r) for r in _rows(data, "process_adj")],
        )


@dataclass
class IsisProcessTag:
    """VRFs of one IS-IS process."""

    process_tag: str = ""
    vrfs: list[IsisVrf] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IsisProcessTag":
        return cls(
            process_tag=to_str(data.get("process-tag-out")),
            vrfs=[IsisVrf.from_dict(r) for r in _rows(data, "vrf")],
        )


@dataclass
class IsisAdjacencyFlat:
    """An adjacency joined with the VRF it belongs to, without its SIDs."""

    vrf_name: str = ""
    adj_summary: bool = False
    adj_interface: bool = False
    sys_name: str = ""
    sys_id: str = ""
    usage: str = ""
    state: str = ""
    hold_time: timedelta = timedelta(0)
    intf_name: str = ""
    detail_set: bool = False
    transitions: int = 0
    flap: bool = False
    flap_time: timedelta = timedelta(0)
    ckt_type: str = ""
    ipv4_addr: str = ""
    ipv6_addr: str = ""
    bcast: bool = False
    bfd_ipv4_establish: bool = False
    bfd_ipv6_establish: bool = False
    resurrect: bool = False
    restart_capable: bool = False
    restart_ack: bool = False
    restart_mode: bool = False
    restart_adj_seen_ra: bool = False
    restart_adj_seen_csnp: bool = False
    restart_adj_seen_l1_csnp: bool = False
    restart_adj_seen_l2_csnp: bool = False
    restart_suppress_adj: bool = False


_ADJ_FLAT_FIELDS = tuple(f.name for f in fields(IsisAdjacency) if f.name != "sids")


@dataclass
class ShowIsisAdjDetailResult:
    """A single "show isis adjacency detail" command output."""

    process_tags: list[IsisProcessTag] = field(default_factory=list)
    code: str = ""
    input: str = ""
    msg: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShowIsisAdjDetailResult":
        body = data.get("body") or {}
        return cls(
            process_tags=[IsisProcessTag.from_dict(r) for r in _rows(body, "process_tag")],
            code=to_str(data.get("code")),
            input=to_str(data.get("input")),
            msg=to_str(data.get("msg")),
        )

    def flat(self) -> list[IsisAdjacencyFlat]:
        """Return every adjacency across all processes and VRFs as flat records."""
        return [
            IsisAdjacencyFlat(
                vrf_name=vrf.vrf_name,
                adj_summary=vrf.adj_summary,
                adj_interface=vrf.adj_interface,
                **{name: getattr(adj, name) for name in _ADJ_FLAT_FIELDS},
            )
            for tag in self.process_tags
            for vrf in tag.vrfs
            for adj in vrf.adjacencies
        ]


@dataclass
class ShowIsisAdjDetailResponse:
    """A full NX-API response wrapping one IS-IS adjacency output."""

    output: ShowIsisAdjDetailResult = field(default_factory=ShowIsisAdjDetailResult)
    sid: str = ""
    type: str = ""
    version: str = ""

    def flat(self) -> list[IsisAdjacencyFlat]:
        """Return the flat adjacency records of the wrapped output."""
        return self.output.flat()


def parse_show_isis_adj_detail(source: Any) -> ShowIsisAdjDetailResponse:
    """Decode a full NX-API response for "show isis adjacency detail"."""
    env = Envelope.from_dict(load_document(source))
    return ShowIsisAdjDetailResponse(
        ShowIsisAdjDetailResult.from_dict(env.output), env.sid, env.type, env.version
    )


def parse_show_isis_adj_detail_result(source: Any) -> ShowIsisAdjDetailResult:
    """Decode a single "show isis adjacency detail" output object."""
    return ShowIsisAdjDetailResult.from_dict(load_document(source))