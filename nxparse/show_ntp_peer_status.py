"""Decoding of "show ntp peer-status" output."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from nxparse.decode import Envelope, as_list, load_document, to_float, to_int, to_str

__all__ = [
    "NtpPeer",
    "ShowNtpPeerStatusResult",
    "ShowNtpPeerStatusResponse",
    "parse_show_ntp_peer_status",
    "parse_show_ntp_peer_status_result",
]


@dataclass
class NtpPeer:
    """One row of the NTP peer status table."""

    syncmode: str = ""
    remote: str = ""
    local: str = ""
    st: int = 0
    poll: int = 0
    reach: str = ""
    delay: float = 0.0
    vrf: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NtpPeer":
        return cls(
            syncmode=to_str(data.get("syncmode")),
            remote=to_str(data.get("remote")),
            local=to_str(data.get("local")),
            st=to_int(data.get("st")),
            poll=to_int(data.get("poll")),
            reach=to_str(data.get("reach")),
            delay=to_float(data.get("delay")),
            vrf=to_str(data.get("vrf")),
        )


@dataclass
class ShowNtpPeerStatusResult:
    """A single "show ntp peer-status" command output."""

    totalpeers: str = ""
    peers: list[NtpPeer] = field(default_factory=list)
    code: str = ""
    input: str = ""
    msg: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShowNtpPeerStatusResult":
        body = data.get("body") or {}
        return cls(
            totalpeers=to_str(body.get("totalpeers")),
            peers=[
                NtpPeer.from_dict(row)
                for table in as_list(body.get("TABLE_peersstatus"))
                for row in as_list(table.get("ROW_peersstatus"))
            ],
            code=to_str(data.get("code")),
            input=to_str(data.get("input")),
            msg=to_str(data.get("msg")),
        )

    def flat(self) -> list[NtpPeer]:
        """Return independent copies of every peer row."""
        return [replace(peer) for peer in self.peers]


@dataclass
class ShowNtpPeerStatusResponse:
    """A full NX-API response wrapping one peer-status output."""

    output: ShowNtpPeerStatusResult = field(default_factory=ShowNtpPeerStatusResult)
    sid: str = ""
    type: str = ""
    version: str = ""

    def flat(self) -> list[NtpPeer]:
        """Return the peer rows of the wrapped output."""
        return self.output.flat()


def parse_show_ntp_peer_status(source: Any) -> ShowNtpPeerStatusResponse:
    """Decode a full NX-API response for "show ntp peer-status"."""
    env = Envelope.from_dict(load_document(source))
    return ShowNtpPeerStatusResponse(
        ShowNtpPeerStatusResult.from_dict(env.output), env.sid, env.type, env.version
    )


def parse_show_ntp_peer_status_result(source: Any) -> ShowNtpPeerStatusResult:
    """Decode a single "show ntp peer-status" output object."""
    return ShowNtpPeerStatusResult.from_dict(load_document(source))