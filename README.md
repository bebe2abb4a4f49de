# pasmpp

An SMPP 3.4 library built on asyncio.

## What it contains

| Module | Contents |
| --- | --- |
| `pasmpp.commands` | `CommandId`, `CommandStatus`, `BindType`, `is_response_command()` |
| `pasmpp.params` | `Ton`, `Npi`, `DataCoding`, `PriorityFlag`, `MessageState`, `InterfaceVersion`, `ReplaceIfPresentFlag`, `OparamTag`, and the bit-packed `EsmClass` and `RegisteredDelivery` |
| `pasmpp.oparam` | `OptionalParameters`, the TLV optional parameters |
| `pasmpp.codec` | field-level readers and writers (`Cursor`, `Field`, `encode_fields`, `decode_fields`) and `SmppLengthError` |
| `pasmpp.pdu` | request PDUs: `SubmitSm`, `DeliverSm`, `DataSm`, `QuerySm`, `ReplaceSm`, `CancelSm`, `AlertNotification`, `BindRequest` |
| `pasmpp.responses` | response PDUs: `SubmitSmResp`, `DeliverSmResp`, `DataSmResp`, `QuerySmResp`, `ReplaceSmResp`, `CancelSmResp`, `GenericNack`, `BindResp` |
| `pasmpp.session` | `Session` over an asyncio stream pair, `encode_header()`, `decode_header()` |
| `pasmpp.client` | `Client`, which connects, binds and retries |
| `pasmpp.server` | `Server`, which listens and authenticates bind requests |
| `pasmpp.buffer` | `FlatBuffer`, the fixed-capacity receive buffer |
| `pasmpp.short_message` | `UserDataHeader`, `MultiPartData`, `pack_short_message()`, `unpack_short_message()` |
| `pasmpp.coding` | `Alphabet`, `extract_alphabet()` |
| `pasmpp.unicode` | `convert_gsm_to_ucs2()`, `convert_ascii_to_ucs2()` |
| `pasmpp.address` | `convert_to_international()` |
| `pasmpp.timefmt` | `abs_time_to_smpp()`, `smpp_time_to_abs()` |
| `pasmpp.config` | `validate_config()`, `load_config()`, `ConfigError`, `SCHEMA` |

## Installation

```
pip install pasmpp
```

## Encoding and decoding PDUs

`encode()` returns the PDU body without the 16-byte header. `decode()` rebuilds the PDU from a body. Bind PDUs take the bind type as well, because the bind type is carried by the command id:

```python
from pasmpp.pdu import SubmitSm, BindRequest
from pasmpp.params import Ton
from pasmpp.commands import BindType

pdu = SubmitSm(source_addr="1000", dest_addr_ton=Ton.INTERNATIONAL,
               dest_addr="1234", short_message=b"hello")
body = pdu.encode()
assert SubmitSm.decode(body) == pdu

bind = BindRequest.decode(BindRequest(system_id="esme").encode(), BindType.TRANSMITTER)
```

A string that exceeds its field limit raises `SmppLengthError`, which is a `ValueError`.

## Optional parameters

```python
from pasmpp.oparam import OptionalParameters
from pasmpp.params import OparamTag

params = OptionalParameters()
params.set_string(OparamTag.RECEIPTED_MESSAGE_ID, b"abc")
assert OparamTag.RECEIPTED_MESSAGE_ID in params
assert OptionalParameters.from_bytes(params.encode()) == params
```

## Short messages

```python
from pasmpp.short_message import MultiPartData, UserDataHeader, pack_short_message, unpack_short_message
from pasmpp.params import DataCoding, EsmClass, GsmNetworkFeatures

header = UserDataHeader()
header.set_multi_part_data(MultiPartData(concat_sm_ref_num=7, number_of_parts=2, sequence_number=1))
payload = pack_short_message(header, b"part one", DataCoding.DEFAULTS)

udh, body = unpack_short_message(EsmClass(gsm_network_features=GsmNetworkFeatures.UDHI),
                                 DataCoding.DEFAULTS, payload)
assert udh.multi_part_data().number_of_parts == 2
```

A message may be up to 160 bytes when its data coding is 8-bit ASCII and up to 140 bytes otherwise. Anything longer raises `ValueError`.

## Sessions, clients and servers

A `Session` frames PDUs over an asyncio reader/writer pair. It answers `enquire_link` and `unbind`, sends `enquire_link` on an idle bound link, and closes itself after the inactivity threshold. You react to it by setting handler attributes: `close_handler`, `request_handler`, `response_handler`, `send_buf_available_handler` and `deserialization_error_handler`. Requests are sent with `send()`, which returns the sequence number. Responses are sent with `send_response()`.

```python
import asyncio
from pasmpp.server import Server
from pasmpp.commands import CommandStatus

def authenticate(bind_request, ip_address):
    return CommandStatus.ROK

def on_bind(bind_request, session):
    print("bound:", bind_request.system_id)

async def main():
    server = Server("127.0.0.1", 2775, "gateway", 30, 10, authenticate, on_bind)
    await server.start()
    await asyncio.Event().wait()

asyncio.run(main())
```

A `Client` takes a `BindRequest`, a `bind_handler(bind_resp, session)` and an `error_handler(message)`. You call `start()` from a running event loop. A failed connection is retried every `retry_delay` seconds, 5 by default. `close()` stops the client.

## Configuration

`validate_config()` checks a gateway configuration document against a JSON schema (draft 7). `load_config()` reads the document from a JSON file and then validates it. Both raise `ConfigError` on failure.

```python
from pasmpp.config import load_config, ConfigError

try:
    config = load_config("config.json")
except ConfigError as exc:
    print("invalid configuration:", exc)
```

## What this package does not do

This is a protocol library. It is not a running gateway. It ships no command-line program. It does not route messages or apply policies. It has no file or message-trace logging and exports no metrics. It can validate a gateway configuration document, but nothing in the package acts on the settings that document describes.

## Tests

```
pip install "pasmpp[test]"
pytest
```