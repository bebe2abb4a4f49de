"""SMPP response PDUs and their body layouts."""

from dataclasses import dataclass, field

from .codec import Field, FieldKind, decode_fields
from .commands import BindType, CommandId
from .oparam import OptionalParameters
from .params import MessageState
from .pdu import Pdu


def _cstr(name, max_length):
    return Field(name, FieldKind.C_OCTET_STR, max_length=max_length)


def _oparam():
    return Field("oparam", FieldKind.SMART, OptionalParameters)


class _Response(Pdu):
    IS_RESPONSE = True


@dataclass
class BindResp(_Response):
    bind_type: BindType = BindType.TRANSCEIVER
    system_id: str = ""
    oparam: OptionalParameters = field(default_factory=OptionalParameters)

    CAN_BE_OMITTED = True
    FIELDS = (
        _cstr("system_id", 31),
        _oparam(),
    )

    @property
    def command_id(self):
        if self.bind_type == BindType.TRANSMITTER:
            return CommandId.BIND_TRANSMITTER_RESP
        if self.bind_type == BindType.RECEIVER:
            return CommandId.BIND_RECEIVER_RESP
        return CommandId.BIND_TRANSCEIVER_RESP

    @classmethod
    def decode(cls, data, bind_type):
        """Build the response from its body; the bind type comes from the command id."""
        bind_type = BindType(bind_type)
        if not data:
            return cls(bind_type=bind_type)
        return cls(bind_type=bind_type, **decode_fields(cls.FIELDS, data))


@dataclass
class CancelSmResp(_Response):
    COMMAND_ID = CommandId.CANCEL_SM_RESP
    FIELDS = ()


@dataclass
class DataSmResp(_Response):
    message_id: str = ""
    oparam: OptionalParameters = field(default_factory=OptionalParameters)

    COMMAND_ID = CommandId.DATA_SM_RESP
    FIELDS = (
        _cstr("message_id", 65),
        _oparam(),
    )


@dataclass
class DeliverSmResp(_Response):
    message_id: str = ""

    COMMAND_ID = CommandId.DELIVER_SM_RESP
    CAN_BE_OMITTED = True
    FIELDS = (_cstr("message_id", 1),)


@dataclass
class GenericNack(_Response):
    COMMAND_ID = CommandId.GENERIC_NACK
    FIELDS = ()


@dataclass
class QuerySmResp(_Response):
    message_id: str = ""
    final_date: str = ""
    message_state: MessageState = MessageState.UNKNOWN
    error_code: int = 0

    COMMAND_ID = CommandId.QUERY_SM_RESP
    FIELDS = (
        _cstr("message_id", 65),
        _cstr("final_date", 17),
        Field("message_state", FieldKind.ENUM_U8, MessageState),
        Field("error_code", FieldKind.U8),
    )


@dataclass
class ReplaceSmResp(_Response):
    COMMAND_ID = CommandId.REPLACE_SM_RESP
    FIELDS = ()


@dataclass
class SubmitSmResp(_Response):
    message_id: str = ""

    COMMAND_ID = CommandId.SUBMIT_SM_RESP
    CAN_BE_OMITTED = True
    FIELDS = (_cstr("message_id", 65),)