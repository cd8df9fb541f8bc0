import io
import json

import pytest

from nxparse.decode import ParseError
from nxparse.show_system_resources import (
    CpuUsage,
    ShowSystemResourcesBody,
    ShowSystemResourcesResponse,
    ShowSystemResourcesResult,
    parse_show_system_resources,
    parse_show_system_resources_result,
)

OUTPUT = {
    "body": {
        "load_avg_1min": "0.80",
        "load_avg_5min": "0.68",
        "load_avg_15min": "0.67",
        "processes_total": "827",
        "processes_running": "2",
        "cpu_state_user": "7.36",
        "cpu_state_kernel": "8.62",
        "cpu_state_idle": "84.01",
        "TABLE_cpu_usage": {
            "ROW_cpu_usage": [
                {"cpuid": "0", "user": "13.13", "kernel": "12.12", "idle": "74.74"},
                {"cpuid": "1", "user": "5.10", "kernel": "13.26", "idle": "81.63"},
                {"cpuid": "2", "user": "10.20", "kernel": "4.08", "idle": "85.71"},
                {"cpuid": "3", "user": "1.01", "kernel": "5.05", "idle": "93.93"},
            ]
        },
        "memory_usage_total": "16400304",
        "memory_usage_used": "7069080",
        "memory_usage_free": "9331224",
        "current_memory_status": "OK",
    },
    "code": "200",
    "input": "show system resources",
    "msg": "Success",
}

RESPONSE = {
    "ins_api": {
        "outputs": {"output": OUTPUT},
        "sid": "eoc",
        "type": "cli_show",
        "version": "1.0",
    }
}

EXPECTED_BODY = ShowSystemResourcesBody(
    load_avg_1min=0.8,
    load_avg_5min=0.68,
    load_avg_15min=0.67,
    processes_total=827,
    processes_running=2,
    cpu_state_user=7.36,
    cpu_state_kernel=8.62,
    cpu_state_idle=84.01,
    memory_usage_total=16400304,
    memory_usage_used=7069080,
    memory_usage_free=9331224,
    current_memory_status="OK",
    cpu_usage=[
        CpuUsage(0, 13.13, 12.12, 74.74),
        CpuUsage(1, 5.1, 13.26, 81.63),
        CpuUsage(2, 10.2, 4.08, 85.71),
        CpuUsage(3, 1.01, 5.05, 93.93),
    ],
)


def test_parse_full_response():
    dat = parse_show_system_resources(json.dumps(RESPONSE).encode())
    expected = ShowSystemResourcesResponse(
        output=ShowSystemResourcesResult(
            body=EXPECTED_BODY,
            code="200",
            input="show system resources",
            msg="Success",
        ),
        sid="eoc",
        type="cli_show",
        version="1.0",
    )
    assert dat == expected


def test_parse_result_only():
    dat = parse_show_system_resources_result(json.dumps(OUTPUT))
    assert dat.body == EXPECTED_BODY
    assert dat.msg == "Success"


def test_parse_from_reader():
    dat = parse_show_system_resources(io.StringIO(json.dumps(RESPONSE)))
    assert dat.output.body.memory_usage_total == 16400304
    assert [cpu.cpuid for cpu in dat.output.body.cpu_usage] == [0, 1, 2, 3]


def test_numeric_json_values():
    doc = {"body": {"load_avg_1min": 1.5, "processes_total": 10,
                    "TABLE_cpu_usage": {"ROW_cpu_usage": {"cpuid": 7, "idle": 99}}}}
    dat = parse_show_system_resources_result(json.dumps(doc))
    assert dat.body.load_avg_1min == 1.5
    assert dat.body.processes_total == 10
    assert dat.body.cpu_usage == [CpuUsage(cpuid=7, idle=99.0)]


def test_missing_fields_default():
    dat = parse_show_system_resources_result("{}")
    assert dat == ShowSystemResourcesResult()


def test_empty_input_raises():
    with pytest.raises(ParseError, match="missing result"):
        parse_show_system_resources(b"")


def test_invalid_json_raises():
    with pytest.raises(ParseError, match="parsing error"):
        parse_show_system_resources("not json")


def test_bad_float_raises():
    doc = {"body": {"cpu_state_user": "lots"}}
    with pytest.raises(ParseError):
        parse_show_system_resources_result(json.dumps(doc))