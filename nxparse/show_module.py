"""Decoding of "show module" output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from nxparse.decode import Envelope, as_list, load_document, to_int, to_str

__all__ = [
    "ModuleDiagInfo",
    "ModuleInfo",
    "ModuleMacInfo",
    "ModulePowerInfo",
    "ModuleWwnInfo",
    "ShowModuleResult",
    "ShowModuleResponse",
    "parse_show_module",
    "parse_show_module_result",
]


def _rows(body: dict, name: str) -> list[dict]:
    return [
        row
        for table in as_list(body.get(f"TABLE_{name}"))
        for row in as_list(table.get(f"ROW_{name}"))
    ]


@dataclass
class ModuleDiagInfo:
    diagstatus: str = ""
    mod: int = 0


@dataclass
class ModuleInfo:
    model: str = ""
    modinf: int = 0
    modtype: str = ""
    ports: int = 0
    status: str = ""


@dataclass
class ModuleMacInfo:
    mac: str = ""
    modmac: int = 0
    serialnum: str = ""


@dataclass
class ModulePowerInfo:
    modpwr: int = 0
    pwrstat: str = ""
    reason: str = ""


@dataclass
class ModuleWwnInfo:
    hw: str = ""
    modwwn: int = 0
    slottype: str = ""
    sw: str = ""


@dataclass
class ShowModuleResult:
    diag_info: list[ModuleDiagInfo] = field(default_factory=list)
    module_info: list[ModuleInfo] = field(default_factory=list)
    mac_info: list[ModuleMacInfo] = field(default_factory=list)
    power_info: list[ModulePowerInfo] = field(default_factory=list)
    wwn_info: list[ModuleWwnInfo] = field(default_factory=list)
    code: str = ""
    input: str = ""
    msg: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShowModuleResult":
        body = data.get("body") or {}
        return cls(
            diag_info=[
                ModuleDiagInfo(to_str(r.get("diagstatus")), to_int(r.get("mod")))
                for r in _rows(body, "moddiaginfo")
            ],
            module_info=[
                ModuleInfo(
                    to_str(r.get("model")),
                    to_int(r.get("modinf")),
                    to_str(r.get("modtype")),
                    to_int(r.get("ports")),
                    to_str(r.get("status")),
                )
                for r in _rows(body, "modinfo")
            ],
            mac_info=[
                ModuleMacInfo(to_str(r.get("mac")), to_int(r.get("modmac")), to_str(r.get("serialnum")))
                for r in _rows(body, "modmacinfo")
            ],
            power_info=[
                ModulePowerInfo(to_int(r.get("modpwr")), to_str(r.get("pwrstat")), to_str(r.get("reason")))
                for r in _rows(body, "modpwrinfo")
            ],
            wwn_info=[
                ModuleWwnInfo(
                    to_str(r.get("hw")), to_int(r.get("modwwn")), to_str(r.get("slottype")), to_str(r.get("sw"))
                )
                for r in _rows(body, "modwwninfo")
            ],
            code=to_str(data.get("code")),
            input=to_str(data.get("input")),
            msg=to_str(data.get("msg")),
        )


@dataclass
class ShowModuleResponse:
    output: ShowModuleResult = field(default_factory=ShowModuleResult)
    sid: str = ""
    type: str = ""
    version: str = ""


def parse_show_module(source: Any) -> ShowModuleResponse:
    """Decode a full NX-API response for "show module"."""
    env = Envelope.from_dict(load_document(source))
    return ShowModuleResponse(ShowModuleResult.from_dict(env.output), env.sid, env.type, env.version)


def parse_show_module_result(source: Any) -> ShowModuleResult:
    """Decode a single "show module" output object."""
    return ShowModuleResult.from_dict(load_document(source))