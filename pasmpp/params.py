"""SMPP parameter enumerations and bit-packed flag fields."""

from dataclasses import dataclass

from .commands import _OpenIntEnum


class DataCoding(_OpenIntEnum):
    DEFAULTS = 0
    IA5 = 1  # ia5 (ccitt t.50)/ascii (ansi x3.4)
    BINARY_ALIAS = 2
    ISO8859_1 = 3  # latin 1
    BINARY = 4
    JIS = 5
    ISO8859_5 = 6  # cyrillic
    ISO8859_8 = 7  # latin/hebrew
    UCS2 = 8  # ucs-2be (big endian)
    PICTOGRAM = 9
    ISO2022_JP = 10  # music codes
    KANJI = 13  # extended kanji jis
    KSC5601 = 14


class MessagingMode(_OpenIntEnum):
    DEFAULTS = 0x00
    DATAGRAM = 0x01
    FORWARD = 0x02
    STORE_AND_FORWARD = 0x03


class MessageType(_OpenIntEnum):
    DEFAULTS = 0x00
    DELIVERY_RECEIPT = 0x04
    DELIVERY_ACK = 0x08
    USER_ACK = 0x10
    CONV_ABORT = 0x18
    INT_DELIVERY_NOTIF = 0x20


class GsmNetworkFeatures(_OpenIntEnum):
    NO = 0x00
    UDHI = 0x40
    REPLY_PATH = 0x80
    BOTH = 0xC0


@dataclass(frozen=True)
class EsmClass:
    """The esm_class octet split into its three bit groups."""

    messaging_mode: MessagingMode = MessagingMode.DEFAULTS
    message_type: MessageType = MessageType.DEFAULTS
    gsm_network_features: GsmNetworkFeatures = GsmNetworkFeatures.NO

    @classmethod
    def from_byte(cls, value):
        return cls(
            MessagingMode(value & 0x03),
            MessageType(value & 0x3C),
            GsmNetworkFeatures(value & 0xC0),
        )

    def __int__(self):
        return int(self.messaging_mode) | int(self.message_type) | int(self.gsm_network_features)


class InterfaceVersion(_OpenIntEnum):
    SMPP_3_4 = 0x34


class MessageState(_OpenIntEnum):
    ENROUTE = 1
    DELIVERED = 2
    EXPIRED = 3
    DELETED = 4
    UNDELIVERABLE = 5
    ACCEPTED = 6
    UNKNOWN = 7
    REJECTED = 8


class Npi(_OpenIntEnum):
    UNKNOWN = 0x00
    E164 = 0x01
    DATA = 0x03
    TELEX = 0x04
    E212 = 0x06
    NATIONAL = 0x08
    PRIVATES = 0x09
    ERMES = 0x0A
    INTERNET = 0x0E
    WAPCLIENT = 0x12


class PriorityFlag(_OpenIntEnum):
    GSM_NON_PRIORITY = 0x0
    GSM_PRIORITY = 0x1
    ANSI_136_BULK = 0x0
    ANSI_136_NORMAL = 0x1
    ANSI_136_URGENT = 0x2
    ANSI_136_VERY_URGENT = 0x3
    IS_95_NORMAL = 0x0
    IS_95_INTERACTIVE = 0x1
    IS_95_URGENT = 0x2
    IS_95_EMERGENCY = 0x3


class SmscDeliveryReceipt(_OpenIntEnum):
    NO = 0x00
    BOTH = 0x01
    FAILED = 0x02
    SUCCEED = 0x03


class SmeOriginatedAck(_OpenIntEnum):
    NO = 0x00
    DELIVERY_ACK = 0x04
    USER_ACK = 0x08
    BOTH = 0x0C


class IntermediateNotification(_OpenIntEnum):
    NO = 0x00
    REQUESTED = 0x10


@dataclass(frozen=True)
class RegisteredDelivery:
    """The registered_delivery octet split into its three bit groups."""

    smsc_delivery_receipt: SmscDeliveryReceipt = SmscDeliveryReceipt.NO
    sme_originated_ack: SmeOriginatedAck = SmeOriginatedAck.NO
    intermediate_notification: IntermediateNotification = IntermediateNotification.NO

    @classmethod
    def from_byte(cls, value):
        return cls(
            SmscDeliveryReceipt(value & 0x03),
            SmeOriginatedAck(value & 0x0C),
            IntermediateNotification(value & 0x10),
        )

    def __int__(self):
        return (
            int(self.smsc_delivery_receipt)
            | int(self.sme_originated_ack)
            | int(self.intermediate_notification)
        )


class ReplaceIfPresentFlag(_OpenIntEnum):
    NO = 0x00
    YES = 0x01


class Ton(_OpenIntEnum):
    UNKNOWN = 0x00
    INTERNATIONAL = 0x01
    NATIONAL = 0x02
    NETWORKSPECIFIC = 0x03
    SUBSCRIBERNUMBER = 0x04
    ALPHANUMERIC = 0x05
    ABBREVIATED = 0x06


class OparamTag(_OpenIntEnum):
    NA = 0
    DEST_ADDR_SUBUNIT = 0x0005
    DEST_NETWORK_TYPE = 0x0006
    DEST_BEARER_TYPE = 0x0007
    DEST_TELEMATICS_ID = 0x0008
    SOURCE_ADDR_SUBUNIT = 0x000D
    SOURCE_NETWORK_TYPE = 0x000E
    SOURCE_BEARER_TYPE = 0x000F
    SOURCE_TELEMATICS_ID = 0x0010
    QOS_TIME_TO_LIVE = 0x0017
    PAYLOAD_TYPE = 0x0019
    ADDITIONAL_STATUS_INFO_TEXT = 0x001D
    RECEIPTED_MESSAGE_ID = 0x001E
    MS_MSG_WAIT_FACILITIES = 0x0030
    PRIVACY_INDICATOR = 0x0201
    SOURCE_SUBADDRESS = 0x0202
    DEST_SUBADDRESS = 0x0203
    USER_MESSAGE_REFERENCE = 0x0204
    USER_RESPONSE_CODE = 0x0205
    SOURCE_PORT = 0x020A
    DESTINATION_PORT = 0x020B
    SAR_MSG_REF_NUM = 0x020C
    LANGUAGE_INDICATOR = 0x020D
    SAR_TOTAL_SEGMENTS = 0x020E
    SAR_SEGMENT_SEQNUM = 0x020F
    SC_INTERFACE_VERSION = 0x0210
    CALLBACK_NUM_PRES_IND = 0x0302
    CALLBACK_NUM_ATAG = 0x0303
    NUMBER_OF_MESSAGES = 0x0304
    CALLBACK_NUM = 0x0381
    DPF_RESULT = 0x0420
    SET_DPF = 0x0421
    MS_AVAILABILITY_STATUS = 0x0422
    NETWORK_ERROR_CODE = 0x0423
    MESSAGE_PAYLOAD = 0x0424
    DELIVERY_FAILURE_REASON = 0x0425
    MORE_MESSAGES_TO_SEND = 0x0426
    MESSAGE_STATE = 0x0427
    USSD_SERVICE_OP = 0x0501
    DISPLAY_TIME = 0x1201
    SMS_SIGNAL = 0x1203
    MS_VALIDITY = 0x1204
    ALERT_ON_MESSAGE_DELIVERY = 0x130C
    ITS_REPLY_TYPE = 0x1380
    ITS_SESSION_INFO = 0x1383

    # vendor-defined tags
    DEST_IMSI = 0x1400
    VLR_NUMBER = 0x1401
    SRC_CLIENT_ID = 0x1402
    DST_CLIENT_ID = 0x1403
    SGW_CLIENT_ID = 0x1404