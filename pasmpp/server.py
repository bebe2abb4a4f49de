"""An SMPP server that accepts connections and authenticates bind requests."""

import asyncio
import ipaddress
import socket

from .commands import CommandStatus
from .pdu import BindRequest
from .responses import BindResp
from .session import Session


class Server:
    """Listens for ESMEs and hands each successfully bound session over.

    authenticate_handler(bind_request, ip_address) returns the command
    status sent back in the bind response; on ROK the session is passed to
    bind_handler(bind_request, session).
    """

    def __init__(
        self,
        host,
        port,
        system_id,
        inactivity_threshold,
        enquirelink_threshold,
        authenticate_handler,
        bind_handler,
    ):
        self._system_id = system_id
        self._inactivity_threshold = inactivity_threshold
        self._enquirelink_threshold = enquirelink_threshold
        self._authenticate_handler = authenticate_handler
        self._bind_handler = bind_handler
        self._binding_sessions = set()
        self._server = None
        self._socket = self._listen(host, port)

    @staticmethod
    def _listen(host, port):
        sock = None
        try:
            address = ipaddress.ip_address(host)
            family = socket.AF_INET6 if address.version == 6 else socket.AF_INET
            sock = socket.socket(family, socket.SOCK_STREAM)
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, port))
            sock.listen(socket.SOMAXCONN)
            sock.setblocking(False)
        except (OSError, ValueError) as exc:
            if sock is not None:
                sock.close()
            raise RuntimeError(f"Failed to listen on {host}:{port} error:{exc}") from exc
        return sock

    @property
    def port(self):
        """The port actually listened on."""
        return self._socket.getsockname()[1]

    async def start(self):
        """Begin accepting connections."""
        self._server = await asyncio.start_server(self._on_accept, sock=self._socket)

    def close(self):
        """Stop listening and drop sessions that have not bound yet."""
        if self._server is not None:
            self._server.close()
        else:
            self._socket.close()
        sessions, self._binding_sessions = self._binding_sessions, set()
        for session in sessions:
            session.close_handler = None
            session.request_handler = None
            session.close("server closed")

    def _on_accept(self, reader, writer):
        session = Session(reader, writer, self._inactivity_threshold, self._enquirelink_threshold)
        self._binding_sessions.add(session)
        session.close_handler = self._on_binding_session_close
        session.request_handler = self._on_binding_session_request
        session.start()

    def _on_binding_session_request(self, session, request, sequence_number):
        if not isinstance(request, BindRequest):
            return

        bind_resp = BindResp(bind_type=request.bind_type, system_id=self._system_id)
        ip_address, _ = session.remote_endpoint()

        status = self._authenticate_handler(request, ip_address)
        session.send_response(bind_resp, sequence_number, status)
        session.request_handler = None
        session.bind()

        if status == CommandStatus.ROK:
            session.close_handler = None
            self._bind_handler(request, session)
            self._binding_sessions.discard(session)

    def _on_binding_session_close(self, session, error):
        self._binding_sessions.discard(session)