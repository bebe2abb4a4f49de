import pytest

from pasmpp.commands import BindType, CommandId, CommandStatus, is_response_command


def test_submit_sm_is_request_and_its_resp_is_response():
    assert is_response_command(CommandId.SUBMIT_SM) is False
    assert is_response_command(CommandId.SUBMIT_SM_RESP) is True


def test_raw_integer_accepted():
    assert is_response_command(0x80000015) is True
    assert is_response_command(0x00000015) is False


@pytest.mark.parametrize("command", list(CommandId))
def test_response_bit_matches_name(command):
    expected = command.name.endswith("_RESP") or command is CommandId.GENERIC_NACK
    assert is_response_command(command) is expected


@pytest.mark.parametrize(
    "command",
    [c for c in CommandId if not is_response_command(c) and f"{c.name}_RESP" in CommandId.__members__],
)
def test_response_id_is_request_id_with_high_bit(command):
    resp = CommandId[f"{command.name}_RESP"]
    assert is_response_command(command) is False
    assert is_response_command(resp) is True
    assert int(resp) == int(command) | 0x80000000


def test_command_id_lookup_from_wire_value():
    assert CommandId(0x80000000) is CommandId.GENERIC_NACK
    assert CommandId(0x00000103) is CommandId.DATA_SM


def test_unknown_command_id_is_kept():
    unknown = CommandId(0x00000777)
    assert isinstance(unknown, CommandId)
    assert int(unknown) == 0x00000777
    assert CommandId(0x00000777) is unknown


def test_command_status_values():
    assert CommandStatus(0x00000058) is CommandStatus.RTHROTTLED
    assert CommandStatus.ROK == 0
    assert CommandStatus(0x0000040B) is CommandStatus.RINVIP


def test_unknown_command_status_is_kept():
    status = CommandStatus(0x00009999)
    assert int(status) == 0x00009999
    assert status != CommandStatus.ROK


def test_bind_type_values():
    assert BindType(0x09) is BindType.TRANSCEIVER
    assert BindType.RECEIVER == 0x01
    assert BindType.TRANSMITTER == 0x02


def test_non_integer_is_rejected():
    with pytest.raises(ValueError):
        CommandId("submit_sm")