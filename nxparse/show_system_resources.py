"""Decoding of "show system resources" output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from nxparse.decode import Envelope, as_list, load_document, to_float, to_int, to_str

__all__ = [
    "CpuUsage",
    "ShowSystemResourcesBody",
    "ShowSystemResourcesResult",
    "ShowSystemResourcesResponse",
    "parse_show_system_resources",
    "parse_show_system_resources_result",
]

_FLOATS = (
    "load_avg_1min", "load_avg_5min", "load_avg_15min",
    "cpu_state_user", "cpu_state_kernel", "cpu_state_idle",
)
_INTS = (
    "processes_total", "processes_running",
    "memory_usage_total", "memory_usage_used", "memory_usage_free",
)


@dataclass
class CpuUsage:
    """Usage figures of one CPU."""

    cpuid: int = 0
    user: float = 0.0
    kernel: float = 0.0
    idle: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CpuUsage":
        return cls(
            cpuid=to_int(data.get("cpuid")),
            user=to_float(data.get("user")),
            kernel=to_float(data.get("kernel")),
            idle=to_float(data.get("idle")),
        )


@dataclass
class ShowSystemResourcesBody:
    """Load, process, CPU and memory figures."""

    load_avg_1min: float = 0.0
    load_avg_5min: float = 0.0
    load_avg_15min: float = 0.0
    processes_total: int = 0
    processes_running: int = 0
    cpu_state_user: float = 0.0
    cpu_state_kernel: float = 0.0
    cpu_state_idle: float = 0.0
    memory_usage_total: int = 0
    memory_usage_used: int = 0
    memory_usage_free: int = 0
    current_memory_status: str = ""
    cpu_usage: list[CpuUsage] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShowSystemResourcesBody":
        values: dict[str, Any] = {name: to_float(data.get(name)) for name in _FLOATS}
        values.update({name: to_int(data.get(name)) for name in _INTS})
        values["current_memory_status"] = to_str(data.get("current_memory_status"))
        values["cpu_usage"] = [
            CpuUsage.from_dict(row)
            for table in as_list(data.get("TABLE_cpu_usage"))
            for row in as_list(table.get("ROW_cpu_usage"))
        ]
        return cls(**values)


@dataclass
class ShowSystemResourcesResult:
    """A single "show system resources" command output."""

    body: ShowSystemResourcesBody = field(default_factory=ShowSystemResourcesBody)
    code: str = ""
    input: str = ""
    msg: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShowSystemResourcesResult":
        return cls(
            body=ShowSystemResourcesBody.from_dict(data.get("body") or {}),
            code=to_str(data.get("code")),
            input=to_str(data.get("input")),
            msg=to_str(data.get("msg")),
        )


@dataclass
class ShowSystemResourcesResponse:
    """A full NX-API response wrapping one system-resources output."""

    output: ShowSystemResourcesResult = field(default_factory=ShowSystemResourcesResult)
    sid: str = ""
    type: str = ""
    version: str = ""


def parse_show_system_resources(source: Any) -> ShowSystemResourcesResponse:
    """Decode a full NX-API response for "show system resources"."""
    env = Envelope.from_dict(load_document(source))
    return ShowSystemResourcesResponse(
        ShowSystemResourcesResult.from_dict(env.output), env.sid, env.type, env.version
    )


def parse_show_system_resources_result(source: Any) -> ShowSystemResourcesResult:
    """Decode a single "show system resources" output object."""
    return ShowSystemResourcesResult.from_dict(load_document(source))