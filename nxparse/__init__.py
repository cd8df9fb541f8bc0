"""Typed parsers for NX-API JSON responses from Nexus switches."""

__version__ = "0.1.0"

__all__ = [
    "decode",
    "timestamp",
    "watts",
    "show_module",
    "show_version",
    "show_ntp_peer_status",
    "show_port_security_address",
    "show_system_resources",
    "show_vpc",
    "show_isis_adj_detail",
]