"""Validation and loading of the gateway configuration document."""

import json

import jsonschema
from jsonschema.exceptions import best_match


class ConfigError(ValueError):
    """The configuration document is unreadable or does not match the schema."""


_STRING = {"type": "string"}
_INTEGER = {"type": "integer"}
_BOOLEAN = {"type": "boolean"}
_STRING_ARRAY = {"type": "array", "items": _STRING}
_MSG_ID_BASE = {"type": "string", "enum": ["HEX", "DEC", "hex", "dec"]}
_FLOW_METHODS = ["disabled", "fixed_flow", "normal", "adaptive", "credit", "limit_credit"]


def _enum(*values):
    return {"type": "string", "enum": list(values)}


def _bounded(minimum=None, maximum=None):
    schema = {"type": "integer"}
    if minimum is not None:
        schema["minimum"] = minimum
    if maximum is not None:
        schema["maximum"] = maximum
    return schema


def _object(properties, required=None, **extra):
    schema = {"type": "object", "properties": properties}
    if required is not None:
        schema["required"] = list(required)
    schema.update(extra)
    return schema


def _file_logger():
    properties = {
        "enabled": _BOOLEAN,
        "file_mode": _enum("text", "binary"),
        "file_name_format": _STRING,
        "create_path": _STRING,
        "close_path": _STRING,
        "buffer_size": _INTEGER,
        "records_threshold": _INTEGER,
        "time_threshold": _INTEGER,
    }
    return _object(properties, properties)


def _flow_control(with_reject):
    properties = {
        "flow_method": _enum(*_FLOW_METHODS),
        "max_packets_per_second": _INTEGER,
    }
    if with_reject:
        properties["should_reject_packet"] = _BOOLEAN
    properties["credit_windows_size"] = _INTEGER
    properties["max_slippage"] = _INTEGER
    return _object(properties)


_CONFIG_SERVER = _object(
    {"port": _bounded(0, 65535), "api_key": _STRING},
    ["port", "api_key"],
)

_LOGGING = _object(
    {
        "level": _enum("trace", "debug", "info", "warning", "error", "critical"),
        "output_mode": _enum("file", "console", "both"),
        "file_name": _STRING,
        "max_file_size": _bounded(10, 500),
        "max_files": _bounded(1, 10),
    },
    **{
        "if": {"properties": {"output_mode": {"enum": ["console"]}}},
        "then": {"required": ["level", "output_mode"]},
        "else": {
            "required": ["level", "output_mode", "file_name", "max_file_size", "max_files"]
        },
    },
)

_PROMETHEUS = _object(
    {
        "address": _STRING,
        "labels": {
            "type": "array",
            "items": _object({"key": _STRING, "value": _STRING}, ["key", "value"]),
            "uniqueItems": True,
        },
    },
    ["address", "labels"],
)

_POLICY = _object(
    {"name": _STRING, "address": _STRING_ARRAY, "timeout": _bounded(0)},
    ["name", "address", "timeout"],
)

_LOGGER = _object(
    {
        "ao_logger": _file_logger(),
        "at_logger": _file_logger(),
        "dr_logger": _file_logger(),
        "reject_logger": _file_logger(),
        "tracer": _object(
            {"enabled": _BOOLEAN, "brokers": _STRING, "topic": _STRING},
            ["enabled", "brokers", "topic"],
        ),
    },
    ["ao_logger", "at_logger", "dr_logger", "reject_logger", "tracer"],
)

_EXTERNAL_CLIENT = _object(
    {
        "system_id": _STRING,
        "permitted_bind_types": {
            "type": "array",
            "default": "TRX",
            "items": _enum("TX", "RX", "TRX"),
            "uniqueItems": True,
        },
        "system_type": _STRING,
        "password": _STRING,
        "require_password_checking": _BOOLEAN,
        "require_ip_checking": _BOOLEAN,
        "ip_addresses": {"type": "array", "items": _STRING, "uniqueItems": True},
        "ip_mask": _STRING,
        "submit_resp_msg_id_base": _MSG_ID_BASE,
        "delivery_report_msg_id_base": _MSG_ID_BASE,
        "ignore_user_validity_period": _BOOLEAN,
        "submit_validity_period": _INTEGER,
        "delivery_report_validity_period": _INTEGER,
        "dialog_timeout": _bounded(0, 1000),
        "status_report_state_generator": _BOOLEAN,
        "status_report_state": _enum("never", "always", "on_failed", "on_succeed"),
        "source_address_check": _BOOLEAN,
        "source_ton_npi_check": _BOOLEAN,
        "destination_address_check": _BOOLEAN,
        "destination_ton_npi_check": _BOOLEAN,
        "dcs_check": _BOOLEAN,
        "black_white_check": _BOOLEAN,
        "max_session": _bounded(0, 50),
        "receive_flow_control": _flow_control(with_reject=True),
        "send_flow_control": _flow_control(with_reject=False),
    },
    [
        "system_id",
        "permitted_bind_types",
        "system_type",
        "password",
        "require_password_checking",
        "submit_resp_msg_id_base",
        "delivery_report_msg_id_base",
        "ignore_user_validity_period",
        "submit_validity_period",
        "delivery_report_validity_period",
        "dialog_timeout",
        "status_report_state_generator",
        "status_report_state",
        "source_address_check",
        "source_ton_npi_check",
        "destination_address_check",
        "destination_ton_npi_check",
        "dcs_check",
        "black_white_check",
        "receive_flow_control",
        "send_flow_control",
    ],
)

_ROUTE_FIELDS = ["id", "priority", "from", "source_address", "destination_address", "pdu_type", "target"]

_ROUTING = _object(
    {
        "reverse": _BOOLEAN,
        "routes": {
            "type": "array",
            "items": _object(
                {
                    "id": _INTEGER,
                    "priority": _INTEGER,
                    "from": _STRING,
                    "source_address": _STRING,
                    "destination_address": _STRING,
                    "pdu_type": _enum("", "*", "submit", "deliver", "delivery_report"),
                    "target": _STRING,
                },
                _ROUTE_FIELDS,
            ),
            "uniqueItems": True,
        },
    },
    ["reverse", "routes"],
)

_SMPP_SERVER = _object(
    {
        "ip": _STRING,
        "port": _bounded(1024, 65535),
        "system_id": _STRING,
        "session_init_timeout": _INTEGER,
        "enquire_link_timeout": _INTEGER,
        "inactivity_timeout": _INTEGER,
        "external_client": {"type": "array", "items": _EXTERNAL_CLIENT, "uniqueItems": True},
        "routing": _ROUTING,
    },
    [
        "ip",
        "port",
        "system_id",
        "session_init_timeout",
        "enquire_link_timeout",
        "inactivity_timeout",
        "external_client",
        "routing",
    ],
)

_NETWORK_INTERFACE = _object(
    {
        "name": _STRING,
        "address": _STRING_ARRAY,
        "timeout": _bounded(0),
        "router": _object(
            {
                "reverse": _BOOLEAN,
                "routing_list": {
                    "type": "array",
                    "items": _object(
                        {
                            "msg_type": _enum("submit"),
                            "method": _enum(
                                "prefix", "client_id", "rond_robin", "load_balance", "broadcast"
                            ),
                            "routes": {
                                "type": "array",
                                "items": _object(
                                    {"id": _STRING, "prefix": _STRING_ARRAY, "target": _STRING},
                                    ["id", "prefix", "target"],
                                ),
                            },
                        },
                        ["msg_type", "method"],
                    ),
                    "uniqueItems": True,
                },
            },
            ["reverse", "routing_list"],
        ),
    },
    ["name", "address", "timeout", "router"],
)

SCHEMA = _object(
    {
        "config_server": _CONFIG_SERVER,
        "logging": _LOGGING,
        "smpp_gateway": _object(
            {
                "prometheus": _PROMETHEUS,
                "policy": _POLICY,
                "logger": _LOGGER,
                "smpp_server": _SMPP_SERVER,
                "network_interface": _NETWORK_INTERFACE,
            },
            ["prometheus", "policy", "logger", "smpp_server", "network_interface"],
        ),
    },
    ["config_server", "logging", "smpp_gateway"],
)

_VALIDATOR = jsonschema.Draft7Validator(SCHEMA)


def validate_config(document):
    """Check document against the gateway schema and return it unchanged."""
    error = best_match(_VALIDATOR.iter_errors(document))
    if error is not None:
        location = "/".join(str(part) for part in error.absolute_path) or "<root>"
        raise ConfigError(f"invalid configuration at {location}: {error.message}")
    return document


def load_config(path):
    """Read a JSON configuration file, validate it and return the document."""
    try:
        with open(path, encoding="utf-8") as stream:
            document = json.load(stream)
    except OSError as exc:
        raise ConfigError(f"cannot read configuration {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"configuration {path} is not valid JSON: {exc}") from exc
    return validate_config(document)