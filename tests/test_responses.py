import pytest

from pasmpp.codec import SmppLengthError
from pasmpp.commands import BindType, CommandId
from pasmpp.oparam import OptionalParameters
from pasmpp.params import MessageState, OparamTag
from pasmpp.responses import (
    BindResp,
    CancelSmResp,
    DataSmResp,
    DeliverSmResp,
    GenericNack,
    QuerySmResp,
    ReplaceSmResp,
    SubmitSmResp,
)


def test_bind_resp_encodes_system_id_with_null():
    resp = BindResp(BindType.TRANSMITTER, "smsc")
    assert resp.encode() == b"smsc\0"


@pytest.mark.parametrize(
    "bind_type, command_id",
    [
        (BindType.TRANSMITTER, CommandId.BIND_TRANSMITTER_RESP),
        (BindType.RECEIVER, CommandId.BIND_RECEIVER_RESP),
        (BindType.TRANSCEIVER, CommandId.BIND_TRANSCEIVER_RESP),
    ],
)
def test_bind_resp_command_id_follows_bind_type(bind_type, command_id):
    assert BindResp(bind_type).command_id == command_id


def test_bind_resp_round_trip_with_oparam():
    oparam = OptionalParameters({OparamTag.SC_INTERFACE_VERSION: b"\x34"})
    resp = BindResp(BindType.RECEIVER, "smsc", oparam)
    assert BindResp.decode(resp.encode(), BindType.RECEIVER) == resp


def test_bind_resp_empty_body_is_allowed():
    resp = BindResp.decode(b"", BindType.TRANSCEIVER)
    assert resp == BindResp(BindType.TRANSCEIVER, "", OptionalParameters())


def test_bind_resp_missing_null_raises():
    with pytest.raises(SmppLengthError):
        BindResp.decode(b"smsc", BindType.TRANSCEIVER)


def test_submit_sm_resp_empty_body():
    assert SubmitSmResp.decode(b"") == SubmitSmResp("")


def test_submit_sm_resp_round_trip():
    resp = SubmitSmResp("abc123")
    assert resp.encode() == b"abc123\0"
    assert SubmitSmResp.decode(resp.encode()) == resp


def test_deliver_sm_resp_message_id_limit():
    with pytest.raises(SmppLengthError):
        DeliverSmResp("a").encode()
    assert DeliverSmResp().encode() == b"\0"
    assert DeliverSmResp.decode(b"") == DeliverSmResp()


def test_query_sm_resp_round_trip():
    resp = QuerySmResp("42", "", MessageState.DELIVERED, 7)
    assert QuerySmResp.decode(resp.encode()) == resp


def test_query_sm_resp_defaults_and_truncation():
    assert QuerySmResp().message_state == MessageState.UNKNOWN
    with pytest.raises(SmppLengthError):
        QuerySmResp.decode(b"42\0\0")


def test_data_sm_resp_round_trip():
    oparam = OptionalParameters({OparamTag.ADDITIONAL_STATUS_INFO_TEXT: b"ok"})
    resp = DataSmResp("id", oparam)
    assert DataSmResp.decode(resp.encode()) == resp


@pytest.mark.parametrize(
    "cls, command_id",
    [
        (GenericNack, CommandId.GENERIC_NACK),
        (CancelSmResp, CommandId.CANCEL_SM_RESP),
        (ReplaceSmResp, CommandId.REPLACE_SM_RESP),
    ],
)
def test_empty_responses(cls, command_id):
    pdu = cls()
    assert pdu.encode() == b""
    assert cls.decode(b"") == pdu
    assert pdu.command_id == command_id
    assert pdu.IS_RESPONSE is True