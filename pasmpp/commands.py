"""SMPP command identifiers, command statuses and bind types."""

from enum import IntEnum

VERSION = (1, 0, 3)

_RESPONSE_BIT = 0x80000000


class _OpenIntEnum(IntEnum):
    """Integer enumeration that also accepts values it has no name for."""

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        pseudo = int.__new__(cls, value)
        pseudo._name_ = f"UNKNOWN_{value:#x}"
        pseudo._value_ = value
        return cls._value2member_map_.setdefault(value, pseudo)


class BindType(_OpenIntEnum):
    RECEIVER = 0x01
    TRANSMITTER = 0x02
    TRANSCEIVER = 0x09


class CommandId(_OpenIntEnum):
    GENERIC_NACK = 0x80000000
    BIND_RECEIVER = 0x00000001
    BIND_RECEIVER_RESP = 0x80000001
    BIND_TRANSMITTER = 0x00000002
    BIND_TRANSMITTER_RESP = 0x80000002
    QUERY_SM = 0x00000003
    QUERY_SM_RESP = 0x80000003
    SUBMIT_SM = 0x00000004
    SUBMIT_SM_RESP = 0x80000004
    DELIVER_SM = 0x00000005
    DELIVER_SM_RESP = 0x80000005
    UNBIND = 0x00000006
    UNBIND_RESP = 0x80000006
    REPLACE_SM = 0x00000007
    REPLACE_SM_RESP = 0x80000007
    CANCEL_SM = 0x00000008
    CANCEL_SM_RESP = 0x80000008
    BIND_TRANSCEIVER = 0x00000009
    BIND_TRANSCEIVER_RESP = 0x80000009
    OUTBIND = 0x0000000B
    ENQUIRE_LINK = 0x00000015
    ENQUIRE_LINK_RESP = 0x80000015
    SUBMIT_MULTI = 0x00000021
    SUBMIT_MULTI_RESP = 0x80000021
    ALERT_NOTIFICATION = 0x00000102
    DATA_SM = 0x00000103
    DATA_SM_RESP = 0x80000103


class CommandStatus(_OpenIntEnum):
    ROK = 0x00000000  # no error
    RINVMSGLEN = 0x00000001  # message length is invalid
    RINVCMDLEN = 0x00000002  # command length is invalid
    RINVCMDID = 0x00000003  # invalid command id
    RINVBNDSTS = 0x00000004  # incorrect bind status for given command
    RALYBND = 0x00000005  # esme already in bound state
    RINVPRTFLG = 0x00000006  # invalid priority flag
    RINVREGDLVFLG = 0x00000007  # invalid registered delivery flag
    RSYSERR = 0x00000008  # system error
    RINVSRCADR = 0x0000000A  # invalid source address
    RINVDSTADR = 0x0000000B  # invalid dest addr
    RINVMSGID = 0x0000000C  # message id is invalid
    RBINDFAIL = 0x0000000D  # bind failed
    RINVPASWD = 0x0000000E  # invalid password
    RINVSYSID = 0x0000000F  # invalid system id
    RCANCELFAIL = 0x00000011  # cancel sm failed
    RREPLACEFAIL = 0x00000013  # replace sm failed
    RMSGQFUL = 0x00000014  # message queue full
    RINVSERTYP = 0x00000015  # invalid service type
    RINVNUMDESTS = 0x00000033  # invalid number of destinations
    RINVDLNAME = 0x00000034  # invalid distribution list name
    RINVDESTFLAG = 0x00000040  # destination flag (submit_multi)
    RINVSUBREP = 0x00000042  # invalid 'submit with replace' request
    RINVESMSUBMIT = 0x00000043  # invalid esm_submit field data
    RCNTSUBDL = 0x00000044  # cannot submit to distribution list
    RSUBMITFAIL = 0x00000045  # submit_sm or submit_multi failed
    RINVSRCTON = 0x00000048  # invalid source address ton
    RINVSRCNPI = 0x00000049  # invalid source address npi
    RINVDSTTON = 0x00000050  # invalid destination address ton
    RINVDSTNPI = 0x00000051  # invalid destination address npi
    RINVSYSTYP = 0x00000053  # invalid system_type field
    RINVREPFLAG = 0x00000054  # invalid replace_if_present flag
    RINVNUMMSGS = 0x00000055  # invalid number of messages
    RTHROTTLED = 0x00000058  # throttling error
    RINVSCHED = 0x00000061  # invalid scheduled delivery time
    RINVEXPIRY = 0x00000062  # invalid message (expiry time)
    RINVDFTMSGID = 0x00000063  # predefined message invalid or not found
    RX_T_APPN = 0x00000064  # esme receiver temporary app error code
    RX_P_APPN = 0x00000065  # esme receiver permanent app error code
    RX_R_APPN = 0x00000066  # esme receiver reject message error code
    RQUERYFAIL = 0x00000067  # query_sm request failed
    RINVOPTPARSTREAM = 0x000000C0  # error in the optional part of the pdu body
    ROPTPARNOTALLWD = 0x000000C1  # optional parameter not allowed
    RINVPARLEN = 0x000000C2  # invalid parameter length
    RMISSINGOPTPARAM = 0x000000C3  # expected optional parameter missing
    RINVOPTPARAMVAL = 0x000000C4  # invalid optional parameter value
    RDELIVERYFAILURE = 0x000000FE  # delivery failure (data_sm_resp)
    RUNKNOWNERR = 0x000000FF  # unknown error
    RSERTYPUNAUTH = 0x00000100  # not authorised to use service_type
    RPROHIBITED = 0x00000101  # prohibited from using operation
    RSERTYPUNAVAIL = 0x00000102  # service_type unavailable
    RSERTYPDENIED = 0x00000103  # service_type denied
    RINVDCS = 0x00000104  # invalid data coding scheme
    RINVSRCADDRSUBUNIT = 0x00000105  # source address sub unit invalid
    RINVDSTADDRSUBUNIT = 0x00000106  # destination address sub unit invalid
    RINVBCASTFREQINT = 0x00000107  # broadcast frequency interval invalid
    RINVBCASTALIAS_NAME = 0x00000108  # broadcast alias name invalid
    RINVBCASTAREAFMT = 0x00000109  # broadcast area format invalid
    RINVNUMBCAST_AREAS = 0x0000010A  # number of broadcast areas invalid
    RINVBCASTCNTTYPE = 0x0000010B  # broadcast content type invalid
    RINVBCASTMSGCLASS = 0x0000010C  # broadcast message class invalid
    RBCASTFAIL = 0x0000010D  # broadcast_sm failed
    RBCASTQUERYFAIL = 0x0000010E  # query_broadcast_sm failed
    RBCASTCANCELFAIL = 0x0000010F  # cancel_broadcast_sm failed
    RINVBCAST_REP = 0x00000110  # number of repeated broadcasts invalid
    RINVBCASTSRVGRP = 0x00000111  # broadcast service group invalid
    RINVBCASTCHANIND = 0x00000112  # broadcast channel indicator invalid
    RINVSEQNUM = 0x00000400  # invalid sequence number
    RTIMEOUT = 0x00000401  # time out
    SRC_ESME_NOT_BOUND = 0x00000402  # source esme client is not bound
    DST_ESME_NOT_BOUND = 0x00000403  # destination esme client is not bound
    MAX_TRY_COUNT = 0x00000404  # message reached max try count
    SRC_HAS_NO_CREDIT = 0x00000405  # source number has no credit
    DST_HAS_NO_CREDIT = 0x00000406  # destination number has no credit
    SRC_IN_BLACK_LIST = 0x00000407  # source number is in black list
    DST_IN_BLACK_LIST = 0x00000408  # destination number is in black list
    SRC_NOT_IN_WHITE_LIST = 0x00000409  # source number not in white list
    DST_NOT_IN_WHITE_LIST = 0x0000040A  # destination number not in white list
    RINVIP = 0x0000040B  # invalid ip


def is_response_command(command_id):
    """Return True when the command id has the response bit set."""
    return bool(int(command_id) & _RESPONSE_BIT)