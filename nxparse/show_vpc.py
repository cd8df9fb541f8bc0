"""Decoding of "show vpc" output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from nxparse.decode import Envelope, as_list, load_document, to_int, to_str

__all__ = [
    "PeerLink",
    "VpcEntry",
    "ShowVpcBody",
    "ShowVpcResult",
    "ShowVpcResponse",
    "parse_show_vpc",
    "parse_show_vpc_result",
]


def _rows(body: dict, name: str) -> list[dict]:
    return [
        row
        for table in as_list(body.get(f"TABLE_{name}"))
        for row in as_list(table.get(f"ROW_{name}"))
    ]


def _key(name: str) -> str:
    return name.replace("_", "-")


@dataclass
class PeerLink:
    """One row of the vPC peer-link table."""

    peer_link_id: str = ""
    peerlink_ifindex: str = ""
    peer_link_port_state: str = ""
    peer_up_vlan_bitset: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PeerLink":
        return cls(
            peer_link_id=to_str(data.get("peer-link-id")),
            peerlink_ifindex=to_str(data.get("peerlink-ifindex")),
            peer_link_port_state=to_str(data.get("peer-link-port-state")),
            peer_up_vlan_bitset=to_str(data.get("peer-up-vlan-bitset")),
        )


@dataclass
class VpcEntry:
    """One row of the vPC table."""

    vpc_id: int = 0
    vpc_ifindex: str = ""
    vpc_port_state: str = ""
    phy_port_if_removed: str = ""
    vpc_thru_peerlink: str = ""
    vpc_consistency: str = ""
    vpc_consistency_status: str = ""
    up_vlan_bitset: str = ""
    es_attr: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VpcEntry":
        return cls(
            vpc_id=to_int(data.get("vpc-id")),
            vpc_ifindex=to_str(data.get("vpc-ifindex")),
            vpc_port_state=to_str(data.get("vpc-port-state")),
            phy_port_if_removed=to_str(data.get("phy-port-if-removed")),
            vpc_thru_peerlink=to_str(data.get("vpc-thru-peerlink")),
            vpc_consistency=to_str(data.get("vpc-consistency")),
            vpc_consistency_status=to_str(data.get("vpc-consistency-status")),
            up_vlan_bitset=to_str(data.get("up-vlan-bitset")),
            es_attr=to_str(data.get("es-attr")),
        )


_STRINGS = (
    "vpc_domain_id", "vpc_peer_status", "vpc_peer_status_reason", "vpc_peer_keepalive_status",
    "vpc_peer_consistency", "vpc_per_vlan_peer_consistency", "vpc_peer_consistency_status",
    "vpc_type_2_consistency", "vpc_type_2_consistency_status", "vpc_role", "peer_gateway",
    "dual_active_excluded_vlans", "vpc_graceful_consistency_check_status",
    "vpc_auto_recovery_status", "vpc_delay_restore_status", "vpc_delay_restore_svi_status",
    "operational_l3_peer", "vpc_peer_link_hdr", "vpc_hdr", "vpc_not_es",
)


@dataclass
class ShowVpcBody:
    """vPC domain state with its peer-link and vPC tables."""

    vpc_domain_id: str = ""
    vpc_peer_status: str = ""
    vpc_peer_status_reason: str = ""
    vpc_peer_keepalive_status: str = ""
    vpc_peer_consistency: str = ""
    vpc_per_vlan_peer_consistency: str = ""
    vpc_peer_consistency_status: str = ""
    vpc_type_2_consistency: str = ""
    vpc_type_2_consistency_status: str = ""
    vpc_role: str = ""
    num_of_vpcs: int = 0
    peer_gateway: str = ""
    dual_active_excluded_vlans: str = ""
    vpc_graceful_consistency_check_status: str = ""
    vpc_auto_recovery_status: str = ""
    vpc_delay_restore_status: str = ""
    vpc_delay_restore_svi_status: str = ""
    operational_l3_peer: str = ""
    vpc_peer_link_hdr: str = ""
    peer_links: list[PeerLink] = field(default_factory=list)
    vpc_end: list[str] = field(default_factory=list)
    vpc_hdr: str = ""
    vpc_not_es: str = ""
    vpcs: list[VpcEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShowVpcBody":
        values: dict[str, Any] = {name: to_str(data.get(_key(name))) for name in _STRINGS}
        values["num_of_vpcs"] = to_int(data.get("num-of-vpcs"))
        values["peer_links"] = [PeerLink.from_dict(row) for row in _rows(data, "peerlink")]
        values["vpc_end"] = [to_str(item) for item in as_list(data.get("vpc-end"))]
        values["vpcs"] = [VpcEntry.from_dict(row) for row in _rows(data, "vpc")]
        return cls(**values)


@dataclass
class ShowVpcResult:
    """A single "show vpc" command output."""

    body: ShowVpcBody = field(default_factory=ShowVpcBody)
    code: str = ""
    input: str = ""
    msg: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShowVpcResult":
        return cls(
            body=ShowVpcBody.from_dict(data.get("body") or {}),
            code=to_str(data.get("code")),
            input=to_str(data.get("input")),
            msg=to_str(data.get("msg")),
        )


@dataclass
class ShowVpcResponse:
    """A full NX-API response wrapping one "show vpc" output."""

    output: ShowVpcResult = field(default_factory=ShowVpcResult)
    sid: str = ""
    type: str = ""
    version: str = ""


def parse_show_vpc(source: Any) -> ShowVpcResponse:
    """Decode a full NX-API response for "show vpc"."""
    env = Envelope.from_dict(load_document(source))
    return ShowVpcResponse(ShowVpcResult.from_dict(env.output), env.sid, env.type, env.version)


def parse_show_vpc_result(source: Any) -> ShowVpcResult:
    """Decode a single "show vpc" output object."""
    return ShowVpcResult.from_dict(load_document(source))