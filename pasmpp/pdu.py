"""SMPP request PDUs and their body layouts."""

from dataclasses import dataclass, field

from .codec import Field, FieldKind, decode_fields, encode_fields
from .commands import BindType, CommandId
from .oparam import OptionalParameters
from .params import (
    DataCoding,
    EsmClass,
    InterfaceVersion,
    Npi,
    PriorityFlag,
    RegisteredDelivery,
    ReplaceIfPresentFlag,
    Ton,
)


def _enum(name, enum_type):
    return Field(name, FieldKind.ENUM_U8, enum_type)


def _flag(name, flag_type):
    return Field(name, FieldKind.FLAG, flag_type)


def _u8(name):
    return Field(name, FieldKind.U8)


def _cstr(name, max_length):
    return Field(name, FieldKind.C_OCTET_STR, max_length=max_length)


def _octets(name, max_length):
    return Field(name, FieldKind.U8_OCTET_STR, max_length=max_length)


def _oparam():
    return Field("oparam", FieldKind.SMART, OptionalParameters)


class Pdu:
    """Base of all PDUs: encodes and decodes the body described by FIELDS."""

    FIELDS = ()
    COMMAND_ID = None
    IS_RESPONSE = False
    CAN_BE_OMITTED = False

    @property
    def command_id(self):
        return self.COMMAND_ID

    def encode(self):
        """Return the PDU body without the header."""
        return encode_fields(self.FIELDS, self)

    @classmethod
    def decode(cls, data):
        """Build the PDU from its body bytes."""
        if cls.CAN_BE_OMITTED and not data:
            return cls()
        return cls(**decode_fields(cls.FIELDS, data))


@dataclass
class AlertNotification(Pdu):
    source_addr_ton: Ton = Ton.UNKNOWN
    source_addr_npi: Npi = Npi.UNKNOWN
    source_addr: str = ""
    esme_addr_ton: Ton = Ton.UNKNOWN
    esme_addr_npi: Npi = Npi.UNKNOWN
    esme_addr: str = ""
    oparam: OptionalParameters = field(default_factory=OptionalParameters)

    COMMAND_ID = CommandId.ALERT_NOTIFICATION
    FIELDS = (
        _enum("source_addr_ton", Ton),
        _enum("source_addr_npi", Npi),
        _cstr("source_addr", 65),
        _enum("esme_addr_ton", Ton),
        _enum("esme_addr_npi", Npi),
        _cstr("esme_addr", 65),
        _oparam(),
    )


@dataclass
class BindRequest(Pdu):
    bind_type: BindType = BindType.TRANSCEIVER
    system_id: str = ""
    password: str = ""
    system_type: str = ""
    interface_version: InterfaceVersion = InterfaceVersion.SMPP_3_4
    addr_ton: Ton = Ton.UNKNOWN
    addr_npi: Npi = Npi.UNKNOWN
    address_range: str = ""

    FIELDS = (
        _cstr("system_id", 31),
        _cstr("password", 31),
        _cstr("system_type", 13),
        _enum("interface_version", InterfaceVersion),
        _enum("addr_ton", Ton),
        _enum("addr_npi", Npi),
        _cstr("address_range", 41),
    )

    @property
    def command_id(self):
        if self.bind_type == BindType.TRANSMITTER:
            return CommandId.BIND_TRANSMITTER
        if self.bind_type == BindType.RECEIVER:
            return CommandId.BIND_RECEIVER
        return CommandId.BIND_TRANSCEIVER

    @classmethod
    def decode(cls, data, bind_type):
        """Build the request from its body; the bind type comes from the command id."""
        return cls(bind_type=BindType(bind_type), **decode_fields(cls.FIELDS, data))


@dataclass
class CancelSm(Pdu):
    service_type: str = ""
    message_id: str = ""
    source_addr_ton: Ton = Ton.UNKNOWN
    source_addr_npi: Npi = Npi.UNKNOWN
    source_addr: str = ""
    dest_addr_ton: Ton = Ton.UNKNOWN
    dest_addr_npi: Npi = Npi.UNKNOWN
    dest_addr: str = ""

    COMMAND_ID = CommandId.CANCEL_SM
    FIELDS = (
        _cstr("service_type", 6),
        _cstr("message_id", 65),
        _enum("source_addr_ton", Ton),
        _enum("source_addr_npi", Npi),
        _cstr("source_addr", 21),
        _enum("dest_addr_ton", Ton),
        _enum("dest_addr_npi", Npi),
        _cstr("dest_addr", 21),
    )


@dataclass
class DataSm(Pdu):
    service_type: str = ""
    source_addr_ton: Ton = Ton.UNKNOWN
    source_addr_npi: Npi = Npi.UNKNOWN
    source_addr: str = ""
    dest_addr_ton: Ton = Ton.UNKNOWN
    dest_addr_npi: Npi = Npi.UNKNOWN
    dest_addr: str = ""
    esm_class: EsmClass = field(default_factory=EsmClass)
    registered_delivery: RegisteredDelivery = field(default_factory=RegisteredDelivery)
    data_coding: DataCoding = DataCoding.DEFAULTS
    oparam: OptionalParameters = field(default_factory=OptionalParameters)

    COMMAND_ID = CommandId.DATA_SM
    FIELDS = (
        _cstr("service_type", 6),
        _enum("source_addr_ton", Ton),
        _enum("source_addr_npi", Npi),
        _cstr("source_addr", 65),
        _enum("dest_addr_ton", Ton),
        _enum("dest_addr_npi", Npi),
        _cstr("dest_addr", 65),
        _flag("esm_class", EsmClass),
        _flag("registered_delivery", RegisteredDelivery),
        _enum("data_coding", DataCoding),
        _oparam(),
    )


@dataclass
class DeliverSm(Pdu):
    service_type: str = ""
    source_addr_ton: Ton = Ton.UNKNOWN
    source_addr_npi: Npi = Npi.UNKNOWN
    source_addr: str = ""
    dest_addr_ton: Ton = Ton.UNKNOWN
    dest_addr_npi: Npi = Npi.UNKNOWN
    dest_addr: str = ""
    esm_class: EsmClass = field(default_factory=EsmClass)
    protocol_id: int = 0
    priority_flag: PriorityFlag = PriorityFlag.GSM_NON_PRIORITY
    schedule_delivery_time: str = ""
    validity_period: str = ""
    registered_delivery: RegisteredDelivery = field(default_factory=RegisteredDelivery)
    replace_if_present_flag: ReplaceIfPresentFlag = ReplaceIfPresentFlag.NO
    data_coding: DataCoding = DataCoding.DEFAULTS
    sm_default_msg_id: int = 0
    short_message: bytes = b""
    oparam: OptionalParameters = field(default_factory=OptionalParameters)

    COMMAND_ID = CommandId.DELIVER_SM
    FIELDS = (
        _cstr("service_type", 6),
        _enum("source_addr_ton", Ton),
        _enum("source_addr_npi", Npi),
        _cstr("source_addr", 21),
        _enum("dest_addr_ton", Ton),
        _enum("dest_addr_npi", Npi),
        _cstr("dest_addr", 21),
        _flag("esm_class", EsmClass),
        _u8("protocol_id"),
        _enum("priority_flag", PriorityFlag),
        _cstr("schedule_delivery_time", 1),
        _cstr("validity_period", 1),
        _flag("registered_delivery", RegisteredDelivery),
        _enum("replace_if_present_flag", ReplaceIfPresentFlag),
        _enum("data_coding", DataCoding),
        _u8("sm_default_msg_id"),
        _octets("short_message", 254),
        _oparam(),
    )


@dataclass
class QuerySm(Pdu):
    message_id: str = ""
    source_addr_ton: Ton = Ton.UNKNOWN
    source_addr_npi: Npi = Npi.UNKNOWN
    source_addr: str = ""

    COMMAND_ID = CommandId.QUERY_SM
    FIELDS = (
        _cstr("message_id", 65),
        _enum("source_addr_ton", Ton),
        _enum("source_addr_npi", Npi),
        _cstr("source_addr", 21),
    )


@dataclass
class ReplaceSm(Pdu):
    message_id: str = ""
    source_addr_ton: Ton = Ton.UNKNOWN
    source_addr_npi: Npi = Npi.UNKNOWN
    source_addr: str = ""
    schedule_delivery_time: str = ""
    validity_period: str = ""
    registered_delivery: RegisteredDelivery = field(default_factory=RegisteredDelivery)
    sm_default_msg_id: int = 0
    short_message: bytes = b""

    COMMAND_ID = CommandId.REPLACE_SM
    FIELDS = (
        _cstr("message_id", 65),
        _enum("source_addr_ton", Ton),
        _enum("source_addr_npi", Npi),
        _cstr("source_addr", 21),
        _cstr("schedule_delivery_time", 17),
        _cstr("validity_period", 17),
        _flag("registered_delivery", RegisteredDelivery),
        _u8("sm_default_msg_id"),
        _octets("short_message", 254),
    )


@dataclass
class SubmitSm(Pdu):
    service_type: str = ""
    source_addr_ton: Ton = Ton.UNKNOWN
    source_addr_npi: Npi = Npi.UNKNOWN
    source_addr: str = ""
    dest_addr_ton: Ton = Ton.UNKNOWN
    dest_addr_npi: Npi = Npi.UNKNOWN
    dest_addr: str = ""
    esm_class: EsmClass = field(default_factory=EsmClass)
    protocol_id: int = 0
    priority_flag: PriorityFlag = PriorityFlag.GSM_NON_PRIORITY
    schedule_delivery_time: str = ""
    validity_period: str = ""
    registered_delivery: RegisteredDelivery = field(default_factory=RegisteredDelivery)
    replace_if_present_flag: ReplaceIfPresentFlag = ReplaceIfPresentFlag.NO
    data_coding: DataCoding = DataCoding.DEFAULTS
    sm_default_msg_id: int = 0
    short_message: bytes = b""
    oparam: OptionalParameters = field(default_factory=OptionalParameters)

    COMMAND_ID = CommandId.SUBMIT_SM
    FIELDS = (
        _cstr("service_type", 6),
        _enum("source_addr_ton", Ton),
        _enum("source_addr_npi", Npi),
        _cstr("source_addr", 21),
        _enum("dest_addr_ton", Ton),
        _enum("dest_addr_npi", Npi),
        _cstr("dest_addr", 21),
        _flag("esm_class", EsmClass),
        _u8("protocol_id"),
        _enum("priority_flag", PriorityFlag),
        _cstr("schedule_delivery_time", 17),
        _cstr("validity_period", 17),
        _flag("registered_delivery", RegisteredDelivery),
        _enum("replace_if_present_flag", ReplaceIfPresentFlag),
        _enum("data_coding", DataCoding),
        _u8("sm_default_msg_id"),
        _octets("short_message", 254),
        _oparam(),
    )