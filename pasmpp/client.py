"""An SMPP client that connects, binds and hands the bound session over."""

import asyncio
import ipaddress

from .codec import SmppLengthError
from .commands import CommandStatus
from .responses import BindResp
from .session import Session

DEFAULT_RETRY_DELAY = 5.0


class Client:
    """Connects to an SMSC, sends a bind request and reports the outcome.

    bind_handler(bind_resp, session) receives the bound session, which
    resumes receiving once the handler returns. error_handler(message) is
    told when the bind is rejected or the connection drops while binding.
    Failed connection attempts are retried every retry_delay seconds.
    """

    def __init__(
        self,
        host,
        port,
        inactivity_threshold,
        enquirelink_threshold,
        bind_request,
        bind_handler,
        error_handler,
    ):
        ipaddress.ip_address(host)
        self.retry_delay = DEFAULT_RETRY_DELAY
        self._host = host
        self._port = port
        self._inactivity_threshold = inactivity_threshold
        self._enquirelink_threshold = enquirelink_threshold
        self._bind_request = bind_request
        self._bind_handler = bind_handler
        self._error_handler = error_handler
        self._binding_session = None
        self._connect_task = None
        self._closed = False

    def start(self):
        """Begin connecting; must be called from a running event loop."""
        if self._closed:
            raise RuntimeError("client is closed")
        self._connect_task = asyncio.get_running_loop().create_task(self._connect())

    def close(self):
        """Stop connecting, drop any session still binding and silence handlers."""
        self._closed = True
        task, self._connect_task = self._connect_task, None
        if task is not None:
            task.cancel()
        self._discard_binding_session("client closed")

    async def _connect(self):
        while True:
            try:
                reader, writer = await asyncio.open_connection(self._host, self._port)
            except OSError:
                await asyncio.sleep(self.retry_delay)
                continue
            break

        self._connect_task = None
        if self._closed:
            writer.close()
            return
        self._on_connect(reader, writer)

    def _on_connect(self, reader, writer):
        session = Session(reader, writer, self._inactivity_threshold, self._enquirelink_threshold)
        session.close_handler = self._on_binding_session_close
        session.response_handler = self._on_binding_session_response
        self._binding_session = session
        session.start()
        try:
            session.send(self._bind_request)
        except SmppLengthError as exc:
            self._discard_binding_session("invalid bind request")
            self._on_error(f"Failed to send bind request, error:{exc}")

    def _on_binding_session_response(self, session, response, sequence_number, command_status):
        if not isinstance(response, BindResp):
            return

        if command_status != CommandStatus.ROK:
            self._on_error("Bind request rejected by the server")
            self._discard_binding_session("bind rejected")
            return

        session.response_handler = None
        session.close_handler = None
        session.pause_receiving()
        session.bind()
        # deferred so the handler may safely close this client
        asyncio.get_running_loop().call_soon(
            self._deliver_bind, response, session, self._bind_handler
        )
        self._binding_session = None

    def _deliver_bind(self, response, session, handler):
        if self._closed:
            session.close("client closed")
            return
        handler(response, session)
        session.resume_receiving()

    def _on_binding_session_close(self, session, error):
        self._on_error(
            "Session has been closed during binding, error:" + (error if error is not None else "none")
        )
        self._binding_session = None

    def _discard_binding_session(self, reason):
        session, self._binding_session = self._binding_session, None
        if session is not None:
            session.close_handler = None
            session.response_handler = None
            session.close(reason)

    def _on_error(self, message):
        asyncio.get_running_loop().call_soon(self._deliver_error, message, self._error_handler)

    def _deliver_error(self, message, handler):
        if self._closed:
            return
        handler(message)