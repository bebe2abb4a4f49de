"""An SMPP session running over an asyncio stream pair."""

import asyncio
import contextlib
import struct
from enum import Enum, auto
from functools import partial

from .buffer import FlatBuffer
from .codec import SmppLengthError
from .commands import BindType, CommandId, CommandStatus, is_response_command
from .pdu import (
    AlertNotification,
    BindRequest,
    CancelSm,
    DataSm,
    DeliverSm,
    QuerySm,
    ReplaceSm,
    SubmitSm,
)
from .responses import (
    BindResp,
    CancelSmResp,
    DataSmResp,
    DeliverSmResp,
    GenericNack,
    QuerySmResp,
    ReplaceSmResp,
    SubmitSmResp,
)

HEADER_LENGTH = 16
_HEADER = struct.Struct(">IIII")
_RECEIVE_CHUNK = 64 * 1024
_RECEIVE_CAPACITY = 1024 * 1024
_DEFAULT_SEND_BUF_THRESHOLD = 1024 * 1024
_MAX_SEQUENCE_NUMBER = 0x7FFFFFFF

_RESPONSE_DECODERS = {
    CommandId.GENERIC_NACK: GenericNack.decode,
    CommandId.BIND_TRANSMITTER_RESP: partial(BindResp.decode, bind_type=BindType.TRANSMITTER),
    CommandId.BIND_RECEIVER_RESP: partial(BindResp.decode, bind_type=BindType.RECEIVER),
    CommandId.BIND_TRANSCEIVER_RESP: partial(BindResp.decode, bind_type=BindType.TRANSCEIVER),
    CommandId.QUERY_SM_RESP: QuerySmResp.decode,
    CommandId.SUBMIT_SM_RESP: SubmitSmResp.decode,
    CommandId.DELIVER_SM_RESP: DeliverSmResp.decode,
    CommandId.REPLACE_SM_RESP: ReplaceSmResp.decode,
    CommandId.CANCEL_SM_RESP: CancelSmResp.decode,
    CommandId.DATA_SM_RESP: DataSmResp.decode,
}

_REQUEST_DECODERS = {
    CommandId.BIND_TRANSMITTER: partial(BindRequest.decode, bind_type=BindType.TRANSMITTER),
    CommandId.BIND_RECEIVER: partial(BindRequest.decode, bind_type=BindType.RECEIVER),
    CommandId.BIND_TRANSCEIVER: partial(BindRequest.decode, bind_type=BindType.TRANSCEIVER),
    CommandId.QUERY_SM: QuerySm.decode,
    CommandId.SUBMIT_SM: SubmitSm.decode,
    CommandId.DELIVER_SM: DeliverSm.decode,
    CommandId.REPLACE_SM: ReplaceSm.decode,
    CommandId.CANCEL_SM: CancelSm.decode,
    CommandId.ALERT_NOTIFICATION: AlertNotification.decode,
    CommandId.DATA_SM: DataSm.decode,
}


def encode_header(command_length, command_id, sequence_number, command_status):
    """Return the 16-byte PDU header."""
    return _HEADER.pack(command_length, int(command_id), int(command_status), sequence_number)


def decode_header(data):
    """Return (command_length, command_id, command_status, sequence_number)."""
    if len(data) < HEADER_LENGTH:
        raise SmppLengthError("header should be at least 16 bytes")
    length, command_id, command_status, sequence_number = _HEADER.unpack_from(data)
    return length, CommandId(command_id), CommandStatus(command_status), sequence_number


class _State(Enum):
    OPEN = auto()
    UNBINDING = auto()
    CLOSED = auto()


class _Receiving(Enum):
    RECEIVING = auto()
    PENDING_PAUSE = auto()
    PAUSED = auto()


def _describe(exc):
    return str(exc) or type(exc).__name__


class Session:
    """One SMPP connection: framing, enquire_link, unbind and handler dispatch.

    Handlers are plain attributes:
    close_handler(session, error_or_None), request_handler(session, pdu, seq),
    response_handler(session, pdu, seq, status), send_buf_available_handler(session),
    deserialization_error_handler(session, message, command_id, body).
    """

    def __init__(self, reader, writer, inactivity_threshold, enquirelink_threshold):
        self.close_handler = None
        self.request_handler = None
        self.response_handler = None
        self.send_buf_available_handler = None
        self.deserialization_error_handler = None
        self.send_buf_threshold = _DEFAULT_SEND_BUF_THRESHOLD

        self._reader = reader
        self._writer = writer
        self._inactivity_threshold = inactivity_threshold
        self._enquirelink_threshold = enquirelink_threshold

        self._state = _State.OPEN
        self._receiving = _Receiving.PAUSED
        self._sequence_number = 0
        self._inactivity_counter = 0
        self._enquirelink_counter = 0

        self._inactivity_task = None
        self._enquirelink_task = None
        self._read_task = None
        self._write_task = None

        self._pending = bytearray()
        self._receive_buf = FlatBuffer(_RECEIVE_CAPACITY)

    @staticmethod
    def _spawn(coro):
        return asyncio.get_running_loop().create_task(coro)

    def start(self):
        """Start the inactivity timer and begin receiving."""
        self._inactivity_task = self._spawn(self._run_inactivity_timer())
        self.resume_receiving()

    def remote_endpoint(self):
        """Return (address, port) of the peer."""
        peer = self._writer.get_extra_info("peername")
        if not peer:
            raise OSError("session has no remote endpoint")
        return peer[0], peer[1]

    def is_open(self):
        return self._state is _State.OPEN

    def unbind(self, force=False):
        """Enter the unbinding state, sending unbind unless force is set."""
        if self._state is _State.OPEN:
            self._state = _State.UNBINDING
            self._unset_enquirelink_timer()
            if not force:
                self._send_command(CommandId.ENQUIRE_LINK if False else CommandId.UNBIND)

    def bind(self):
        """Start sending enquire_link on an idle link."""
        if self._state is _State.OPEN:
            self._unset_enquirelink_timer()
            self._enquirelink_task = self._spawn(self._run_enquirelink_timer())

    def send(self, pdu):
        """Send a request PDU and return the sequence number it was given."""
        if pdu.IS_RESPONSE:
            raise TypeError("PDU isn't a request")
        sequence_number = self._next_sequence_number()
        self._send_impl(pdu, sequence_number, CommandStatus.ROK)
        return sequence_number

    def send_response(self, pdu, sequence_number, command_status):
        """Send a response PDU for the request with the given sequence number."""
        if not pdu.IS_RESPONSE:
            raise TypeError("PDU isn't a response")
        self._send_impl(pdu, sequence_number, command_status)

    def is_send_buf_above_threshold(self):
        return len(self._pending) > self.send_buf_threshold

    def pause_receiving(self):
        if self._receiving is _Receiving.RECEIVING:
            self._receiving = _Receiving.PENDING_PAUSE

    def resume_receiving(self):
        previous, self._receiving = self._receiving, _Receiving.RECEIVING
        if previous is _Receiving.PAUSED:
            self._do_receive()

    def close(self, reason):
        """Close the connection; the close handler runs soon after."""
        if self._state is _State.CLOSED:
            return

        error = reason if self._state is _State.OPEN else None

        with contextlib.suppress(OSError, RuntimeError):
            self._writer.close()

        self._state = _State.CLOSED

        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None
        for task in (self._inactivity_task, self._read_task, self._write_task):
            if task is not None and task is not current:
                task.cancel()

        handler = self.close_handler
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._after_close(error, handler)
        else:
            loop.call_soon(self._after_close, error, handler)

    def _after_close(self, error, handler):
        if handler is not None:
            handler(self, error)
        self.request_handler = None
        self.response_handler = None
        self.send_buf_available_handler = None
        self.close_handler = None
        self.deserialization_error_handler = None
        self._unset_enquirelink_timer()

    def _next_sequence_number(self):
        self._sequence_number += 1
        if self._sequence_number > _MAX_SEQUENCE_NUMBER:
            self._sequence_number = 1
        return self._sequence_number

    async def _run_inactivity_timer(self):
        while True:
            await asyncio.sleep(self._inactivity_threshold)
            if self._inactivity_counter >= 1:
                self.close("Inactivity timer is reached")
                return
            self._inactivity_counter += 1

    async def _run_enquirelink_timer(self):
        while True:
            await asyncio.sleep(self._enquirelink_threshold)
            if self._enquirelink_counter >= 1 and self._state is _State.OPEN:
                self._send_command(CommandId.ENQUIRE_LINK)
            self._enquirelink_counter += 1

    def _unset_enquirelink_timer(self):
        task, self._enquirelink_task = self._enquirelink_task, None
        if task is not None:
            try:
                current = asyncio.current_task()
            except RuntimeError:
                current = None
            if task is not current:
                task.cancel()

    def _do_receive(self):
        buf = self._receive_buf
        while (
            self._state is not _State.CLOSED
            and self._receiving is _Receiving.RECEIVING
            and len(buf) >= HEADER_LENGTH
        ):
            length, command_id, command_status, sequence_number = decode_header(
                buf.data()[:HEADER_LENGTH]
            )
            if length < HEADER_LENGTH:
                self.close("invalid command length")
                return
            if len(buf) < length:
                break
            body = bytes(buf.data()[HEADER_LENGTH:length])
            if is_response_command(command_id):
                self._consume_response(command_id, command_status, sequence_number, body)
            else:
                self._consume_request(command_id, sequence_number, body)
            buf.consume(length)

        if self._state is _State.CLOSED:
            return

        if self._receiving is _Receiving.PENDING_PAUSE:
            self._receiving = _Receiving.PAUSED
            return

        self._read_task = self._spawn(self._read())

    async def _read(self):
        try:
            view = self._receive_buf.prepare(_RECEIVE_CHUNK)
        except SmppLengthError as exc:
            self._read_task = None
            self.close(str(exc))
            return

        try:
            data = await self._reader.read(_RECEIVE_CHUNK)
        except asyncio.CancelledError:
            raise
        except (OSError, RuntimeError, ValueError) as exc:
            self._read_task = None
            self.close(_describe(exc))
            return

        self._read_task = None
        if self._state is _State.CLOSED:
            return
        if not data:
            self.close("End of file")
            return

        view[:len(data)] = data
        self._receive_buf.commit(len(data))

        self._inactivity_counter = 0
        if self._state is _State.OPEN:
            self._enquirelink_counter = 0

        self._do_receive()

    def _report_deserialization_error(self, exc, command_id, body):
        if self.deserialization_error_handler is not None:
            self.deserialization_error_handler(self, str(exc), command_id, body)

    def _consume_response(self, command_id, command_status, sequence_number, body):
        response = None
        try:
            if command_id == CommandId.ENQUIRE_LINK_RESP:
                pass
            elif command_id == CommandId.UNBIND_RESP:
                self.close("unbind_resp received")
            else:
                decoder = _RESPONSE_DECODERS.get(command_id)
                if decoder is None:
                    raise ValueError("Unknown pdu")
                response = decoder(body)
        except ValueError as exc:
            self._report_deserialization_error(exc, command_id, body)

        if response is not None and self._state is _State.OPEN and self.response_handler:
            self.response_handler(self, response, sequence_number, command_status)

    def _consume_request(self, command_id, sequence_number, body):
        request = None
        try:
            if command_id == CommandId.ENQUIRE_LINK:
                self._send_command(CommandId.ENQUIRE_LINK_RESP, sequence_number)
            elif command_id == CommandId.UNBIND:
                if self._state is _State.OPEN:
                    self._state = _State.UNBINDING
                self._send_command(CommandId.UNBIND_RESP, sequence_number)
            else:
                decoder = _REQUEST_DECODERS.get(command_id)
                if decoder is None:
                    self._send_command(
                        CommandId.GENERIC_NACK, sequence_number, CommandStatus.RINVCMDID
                    )
                    raise ValueError("Unknown pdu")
                request = decoder(body)
        except ValueError as exc:
            self._report_deserialization_error(exc, command_id, body)

        if request is not None and self._state is _State.OPEN and self.request_handler:
            self.request_handler(self, request, sequence_number)

    def _send_impl(self, pdu, sequence_number, command_status):
        if self._state is _State.CLOSED:
            raise RuntimeError("Send on closed session")
        if self._state is _State.UNBINDING:
            raise RuntimeError("Send on unbinding session")

        body = pdu.encode()
        header = encode_header(
            HEADER_LENGTH + len(body), pdu.command_id, sequence_number, command_status
        )
        self._pending += header + body
        self._do_send()

    def _send_command(self, command_id, sequence_number=None, command_status=CommandStatus.ROK):
        if sequence_number is None:
            sequence_number = self._next_sequence_number()
        self._pending += encode_header(HEADER_LENGTH, command_id, sequence_number, command_status)
        self._do_send()
        return sequence_number

    def _do_send(self):
        if self._write_task is not None or self._state is _State.CLOSED:
            return

        writing = bytes(self._pending)
        self._pending.clear()

        if len(writing) > self.send_buf_threshold and self.send_buf_available_handler:
            self.send_buf_available_handler(self)

        self._write_task = self._spawn(self._write(writing))

    async def _write(self, data):
        try:
            self._writer.write(data)
            await self._writer.drain()
        except asyncio.CancelledError:
            raise
        except (OSError, RuntimeError) as exc:
            self._write_task = None
            self.close(_describe(exc))
            return

        self._write_task = None
        if self._pending:
            self._do_send()