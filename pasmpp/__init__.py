"""SMPP 3.4 protocol library: PDUs, asyncio sessions, clients, servers, message utilities and configuration validation."""

__version__ = "1.0.3"