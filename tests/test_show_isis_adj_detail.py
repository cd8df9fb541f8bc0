import json
from datetime import timedelta

import pytest

from nxparse.decode import ParseError
from nxparse.show_isis_adj_detail import (
    AdjacencySid,
    IsisAdjacencyFlat,
    parse_show_isis_adj_detail,
    parse_show_isis_adj_detail_result,
)


def _adj(name, intf, ipv4, hold, flap, sid_value):
    return {
        "adj-sys-name-out": name,
        "adj-sys-id-out": "N/A",
        "adj-usage-out": "2",
        "adj-state-out": "UP",
        "adj-hold-time-out": hold,
        "adj-intf-name-out": intf,
        "adj-detail-set-out": "true",
        "adj-transitions-out": "1",
        "adj-flap-out": "true",
        "adj-flap-time-out": flap,
        "adj-ckt-type-out": "L2",
        "adj-ipv4-addr-out": ipv4,
        "adj-ipv6-addr-out": "0::",
        "adj-bcast-out": "false",
        "adj-bfd-ipv4-establish-out": "false",
        "adj-bfd-ipv6-establish-out": "false",
        "adj-resurrect-out": "false",
        "adj-restart-capable-out": "true",
        "adj-restart-ack-out": "false",
        "adj-restart-mode-out": "false",
        "adj-restart-adj-seen-ra-out": "false",
        "adj-restart-adj-seen-csnp-out": "false",
        "adj-restart-adj-seen-l1-csnp-out": "false",
        "adj-restart-adj-seen-l2-csnp-out": "false",
        "adj-restart-suppress-adj-out": "false",
        "TABLE_adj_sid": {
            "ROW_adj_sid": {
                "adj-sid-value": str(sid_value),
                "adj-sid-f-flag": "false",
                "adj-sid-b-flag": "false",
                "adj-sid-v-flag": "true",
                "adj-sid-l-flag": "true",
                "adj-sid-s-flag": "false",
                "adj-sid-p-flag": "false",
                "adj-sid-weight": "1",
            }
        },
    }


def _body():
    return {
        "TABLE_process_tag": {
            "ROW_process_tag": {
                "process-tag-out": "2",
                "TABLE_vrf": {
                    "ROW_vrf": {
                        "vrf-name-out": "default",
                        "adj-summary-out": "false",
                        "adj-interface-out": "false",
                        "TABLE_process_adj": {
                            "ROW_process_adj": [
                                _adj("n9k-reg-4", "Ethernet1/21", "45.1.1.1", "00:00:29", "01:33:34", 16),
                                _adj("n9k-reg-2", "Ethernet1/31", "25.1.1.1", "00:00:28", "01:33:30", 17),
                            ]
                        },
                    }
                },
            }
        }
    }


def _response_text():
    return json.dumps(
        {
            "ins_api": {
                "type": "cli_show",
                "version": "1.0",
                "sid": "eoc",
                "outputs": {
                    "output": {
                        "body": _body(),
                        "code": "200",
                        "input": "show isis 2 adj det",
                        "msg": "Success",
                    }
                },
            }
        }
    )


def test_envelope_fields():
    resp = parse_show_isis_adj_detail(_response_text())
    assert (resp.sid, resp.type, resp.version) == ("eoc", "cli_show", "1.0")
    assert resp.output.code == "200"
    assert resp.output.input == "show isis 2 adj det"
    assert resp.output.msg == "Success"


def test_nested_structure():
    resp = parse_show_isis_adj_detail(_response_text())
    [tag] = resp.output.process_tags
    assert tag.process_tag == "2"
    [vrf] = tag.vrfs
    assert vrf.vrf_name == "default"
    assert vrf.adj_summary is False
    assert vrf.adj_interface is False
    assert [a.sys_name for a in vrf.adjacencies] == ["n9k-reg-4", "n9k-reg-2"]


def test_adjacency_fields():
    adj = parse_show_isis_adj_detail(_response_text()).output.process_tags[0].vrfs[0].adjacencies[0]
    assert adj.sys_id == "N/A"
    assert adj.usage == "2"
    assert adj.state == "UP"
    assert adj.hold_time == timedelta(seconds=29)
    assert adj.intf_name == "Ethernet1/21"
    assert adj.detail_set is True
    assert adj.transitions == 1
    assert adj.flap is True
    assert adj.flap_time == timedelta(seconds=5614)
    assert adj.ckt_type == "L2"
    assert adj.ipv4_addr == "45.1.1.1"
    assert adj.ipv6_addr == "0::"
    assert adj.restart_capable is True
    assert adj.restart_adj_seen_l2_csnp is False
    assert adj.sids == [AdjacencySid(16, False, False, True, True, False, False, 1)]


def test_second_adjacency_durations_and_sid():
    adj = parse_show_isis_adj_detail(_response_text()).output.process_tags[0].vrfs[0].adjacencies[1]
    assert adj.hold_time == timedelta(seconds=28)
    assert adj.flap_time == timedelta(seconds=5610)
    assert adj.sids[0].value == 17


def test_flat_from_response():
    flat = parse_show_isis_adj_detail(_response_text()).flat()
    assert len(flat) == 2
    first = flat[0]
    assert isinstance(first, IsisAdjacencyFlat)
    assert first.vrf_name == "default"
    assert first.sys_name == "n9k-reg-4"
    assert first.hold_time == timedelta(seconds=29)
    assert flat[1].intf_name == "Ethernet1/31"
    assert flat[1].ipv4_addr == "25.1.1.1"


def test_result_parse_matches_response_output():
    result = parse_show_isis_adj_detail_result(json.dumps({"body": _body()}).encode())
    assert result.code == ""
    assert result.input == ""
    assert result.msg == ""
    assert result.process_tags == parse_show_isis_adj_detail(_response_text()).output.process_tags
    assert result.flat() == parse_show_isis_adj_detail(_response_text()).flat()


@pytest.mark.parametrize(
    "text, seconds",
    [("00:00:29", 29), ("05:10", 310), ("1d02h", 93600), ("2w3d", 1468800), ("never", 0), ("45", 45)],
)
def test_duration_forms(text, seconds):
    doc = {"body": {"TABLE_process_tag": {"ROW_process_tag": {"TABLE_vrf": {"ROW_vrf": {
        "TABLE_process_adj": {"ROW_process_adj": {"adj-hold-time-out": text}}}}}}}}
    result = parse_show_isis_adj_detail_result(json.dumps(doc))
    assert result.flat()[0].hold_time == timedelta(seconds=seconds)


def test_bad_duration_raises():
    doc = {"body": {"TABLE_process_tag": {"ROW_process_tag": {"TABLE_vrf": {"ROW_vrf": {
        "TABLE_process_adj": {"ROW_process_adj": {"adj-hold-time-out": "soon"}}}}}}}}
    with pytest.raises(ParseError):
        parse_show_isis_adj_detail_result(json.dumps(doc))


def test_bad_bool_raises():
    doc = {"body": {"TABLE_process_tag": {"ROW_process_tag": {"TABLE_vrf": {"ROW_vrf": {
        "adj-summary-out": "maybe"}}}}}}
    with pytest.raises(ParseError):
        parse_show_isis_adj_detail_result(json.dumps(doc))


def test_empty_body_has_no_adjacencies():
    result = parse_show_isis_adj_detail_result('{"body": {}}')
    assert result.process_tags == []
    assert result.flat() == []


@pytest.mark.parametrize("bad", ["", b""])
def test_empty_input_raises(bad):
    with pytest.raises(ParseError, match="missing result"):
        parse_show_isis_adj_detail(bad)


def test_invalid_json_raises():
    with pytest.raises(ParseError):
        parse_show_isis_adj_detail("[1, 2")