"""Decoding of "show port-security address" output."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from nxparse.decode import Envelope, as_list, load_document, to_int, to_str

__all__ = [
    "PortSecurityAddress",
    "ShowPortSecurityAddressResult",
    "ShowPortSecurityAddressResponse",
    "parse_show_port_security_address",
    "parse_show_port_security_address_result",
]


def _int_list(value: Any) -> list[int]:
    return [to_int(item) for item in as_list(value)]


@dataclass
class PortSecurityAddress:
    """One secured MAC address entry."""

    if_index: str = ""
    vlan_id: int = 0
    type: str = ""
    mac_addr: str = ""
    remain_age: int = 0
    remote_learnt: int = 0
    remote_aged: int = 0
    num_elems: list[int] = field(default_factory=list)
    cmd_addr_index: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PortSecurityAddress":
        return cls(
            if_index=to_str(data.get("if_index")),
            vlan_id=to_int(data.get("vlan_id")),
            type=to_str(data.get("type")),
            mac_addr=to_str(data.get("mac_addr")),
            remain_age=to_int(data.get("remain_age")),
            remote_learnt=to_int(data.get("remote_learnt")),
            remote_aged=to_int(data.get("remote_aged")),
            num_elems=_int_list(data.get("num_elems")),
            cmd_addr_index=_int_list(data.get("cmd_addr_index")),
        )


@dataclass
class ShowPortSecurityAddressResult:
    """A single "show port-security address" command output."""

    total_addr: int = 0
    max_sys_limit: int = 0
    addresses: list[PortSecurityAddress] = field(default_factory=list)
    code: str = ""
    input: str = ""
    msg: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShowPortSecurityAddressResult":
        body = data.get("body") or {}
        return cls(
            total_addr=to_int(body.get("total_addr")),
            max_sys_limit=to_int(body.get("max_sys_limit")),
            addresses=[
                PortSecurityAddress.from_dict(row)
                for table in as_list(body.get("TABLE_eth_port_sec_mac_addrs"))
                for row in as_list(table.get("ROW_eth_port_sec_mac_addrs"))
            ],
            code=to_str(data.get("code")),
            input=to_str(data.get("input")),
            msg=to_str(data.get("msg")),
        )

    def flat(self) -> list[PortSecurityAddress]:
        """Return independent copies of every address entry."""
        return [
            replace(
                entry,
                num_elems=list(entry.num_elems),
                cmd_addr_index=list(entry.cmd_addr_index),
            )
            for entry in self.addresses
        ]


@dataclass
class ShowPortSecurityAddressResponse:
    """A full NX-API response wrapping one port-security output."""

    output: ShowPortSecurityAddressResult = field(default_factory=ShowPortSecurityAddressResult)
    sid: str = ""
    type: str = ""
    version: str = ""

    def flat(self) -> list[PortSecurityAddress]:
        """Return the address entries of the wrapped output."""
        return self.output.flat()


def parse_show_port_security_address(source: Any) -> ShowPortSecurityAddressResponse:
    """Decode a full NX-API response for "show port-security address"."""
    env = Envelope.from_dict(load_document(source))
    return ShowPortSecurityAddressResponse(
        ShowPortSecurityAddressResult.from_dict(env.output), env.sid, env.type, env.version
    )


def parse_show_port_security_address_result(source: Any) -> ShowPortSecurityAddressResult:
    """Decode a single "show port-security address" output object."""
    return ShowPortSecurityAddressResult.from_dict(load_document(source))