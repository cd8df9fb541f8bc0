"""Decoding of "show version" output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from nxparse.decode import Envelope, ParseError, as_list, load_document, to_int, to_str
from nxparse.timestamp import TimeStamp, parse_timestamp

__all__ = [
    "PackageEntry",
    "ShowVersionBody",
    "ShowVersionResult",
    "ShowVersionResponse",
    "parse_show_version",
    "parse_show_version_result",
]


def _timestamp(value: Any) -> TimeStamp:
    try:
        return parse_timestamp(to_str(value))
    except ValueError as exc:
        raise ParseError(f"parsing error: {exc}") from exc


def _uint(value: Any) -> int:
    number = to_int(value)
    if number < 0:
        raise ParseError(f"parsing error: negative value {value!r}")
    return number


_STRINGS = (
    "header_str", "bios_ver_str", "kickstart_ver_str", "nxos_ver_str", "kick_file_name",
    "nxos_file_name", "chassis_id", "cpu_name", "mem_type", "proc_board_id", "host_name",
    "rr_reason", "rr_sys_ver", "rr_service", "plugins", "manufacturer",
)
_TIMES = ("bios_cmpl_time", "kick_cmpl_time", "nxos_cmpl_time", "kick_tmstmp", "nxos_tmstmp", "rr_ctime")
_UINTS = (
    "memory", "bootflash_size", "kern_uptm_days", "kern_uptm_hrs", "kern_uptm_mins",
    "kern_uptm_secs", "rr_usecs",
)


@dataclass
class PackageEntry:
    package_id: str = ""


@dataclass
class ShowVersionBody:
    header_str: str = ""
    bios_ver_str: str = ""
    kickstart_ver_str: str = ""
    nxos_ver_str: str = ""
    bios_cmpl_time: TimeStamp = TimeStamp(0)
    kick_file_name: str = ""
    nxos_file_name: str = ""
    kick_cmpl_time: TimeStamp = TimeStamp(0)
    nxos_cmpl_time: TimeStamp = TimeStamp(0)
    kick_tmstmp: TimeStamp = TimeStamp(0)
    nxos_tmstmp: TimeStamp = TimeStamp(0)
    chassis_id: str = ""
    cpu_name: str = ""
    memory: int = 0
    mem_type: str = ""
    proc_board_id: str = ""
    host_name: str = ""
    bootflash_size: int = 0
    kern_uptm_days: int = 0
    kern_uptm_hrs: int = 0
    kern_uptm_mins: int = 0
    kern_uptm_secs: int = 0
    rr_usecs: int = 0
    rr_ctime: TimeStamp = TimeStamp(0)
    rr_reason: str = ""
    rr_sys_ver: str = ""
    rr_service: str = ""
    plugins: str = ""
    manufacturer: str = ""
    packages: list[PackageEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShowVersionBody":
        values: dict[str, Any] = {name: to_str(data.get(name)) for name in _STRINGS}
        values.update({name: _timestamp(data.get(name)) for name in _TIMES})
        values.update({name: _uint(data.get(name)) for name in _UINTS})
        values["packages"] = [
            PackageEntry(to_str(row.get("package_id")))
            for table in as_list(data.get("TABLE_package_list"))
            for row in as_list(table.get("ROW_package_list"))
        ]
        return cls(**values)


@dataclass
class ShowVersionResult:
    body: ShowVersionBody = field(default_factory=ShowVersionBody)
    code: str = ""
    input: str = ""
    msg: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShowVersionResult":
        return cls(
            body=ShowVersionBody.from_dict(data.get("body") or {}),
            code=to_str(data.get("code")),
            input=to_str(data.get("input")),
            msg=to_str(data.get("msg")),
        )


@dataclass
class ShowVersionResponse:
    output: ShowVersionResult = field(default_factory=ShowVersionResult)
    sid: str = ""
    type: str = ""
    version: str = ""


def parse_show_version(source: Any) -> ShowVersionResponse:
    """Decode a full NX-API response for "show version"."""
    env = Envelope.from_dict(load_document(source))
    return ShowVersionResponse(ShowVersionResult.from_dict(env.output), env.sid, env.type, env.version)


def parse_show_version_result(source: Any) -> ShowVersionResult:
    """Decode a single "show version" output object."""
    return ShowVersionResult.from_dict(load_document(source))