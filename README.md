# remotekit

Building blocks for remote-desktop style tools: models of keys and mouse
buttons, a small input language, per-platform key tables, packet framing,
zstd compression, and asyncio TCP/UDP helpers.

## Modules

- **`remotekit.keys`**: the `Key` and `MouseButton` enums, plus `Layout`
  (a key identified by the single character it types) and `Raw` (a raw
  16-bit keycode). `Key.COMMAND`, `Key.SUPER` and `Key.WINDOWS` report
  `deprecated` as true; use `Key.META`.
- **`remotekit.dsl`**: `tokenize(text)` turns a string such as
  `"{+CTRL}a{-CTRL}"` into a list of `Token`s (`TokenKind.SEQUENCE`,
  `UNICODE`, `KEY_DOWN`, `KEY_UP`). Known tags are `+SHIFT`/`-SHIFT`,
  `+CTRL`/`-CTRL`, `+META`/`-META`, `+ALT`/`-ALT` and
  `+UNICODE`/`-UNICODE`; `{{` and `}}` are literal braces. Bad input raises a
  `ParseError` subclass: `UnknownTagError`, `UnexpectedOpenError`,
  `UnmatchedOpenError` or `UnmatchedCloseError`. `evaluate(target, text)`
  parses the whole string first, then clicks each plain character as a
  `Layout` key, types `UNICODE` text with `key_sequence`, and presses and
  releases modifiers; an `OSError` from `key_down` is ignored.
- **`remotekit.controllable`**: abstract base classes `KeyboardControllable`
  (`key_sequence`, `key_down`, `key_up`, `key_click`, `get_key_state`, and
  `key_sequence_parse` which runs the DSL) and `MouseControllable`
  (`mouse_move_to`, `mouse_move_relative`, `mouse_down`, `mouse_up`,
  `mouse_scroll_x`, `mouse_scroll_y`, and `mouse_click` which presses and
  releases, ignoring an `OSError` from the press).
- **`remotekit.xdokeys`** (X11): `mouse_button_code`, `key_sequence_name`,
  `key_state_from_mask` and `scroll_clicks`.
- **`remotekit.mackeys`** (macOS): `virtual_key_code`, `layout_key_code`,
  `scroll_steps`, and `ClickCounter`, which counts presses that fall within
  the double-click interval (500 ms by default).
- **`remotekit.winkeys`** (Windows): `virtual_key_code(key, layout_lookup)`
  (layout keys are resolved through the callable you pass), `utf16_units`,
  `key_state_from_flags` and `wheel_delta`.
- **`remotekit.bytes_codec`**: `BytesCodec` prefixes each packet with a 1 to
  4 byte little-endian length header; `decode` consumes a `bytearray` in
  place and returns `None` until a whole packet is there. `set_raw()`
  disables framing; `set_max_packet_length(n)` makes `decode` raise
  `CodecError` for longer packets. Packets over 0x3FFFFFFF bytes cannot be
  encoded.
- **`remotekit.compress`**: `compress(data, level)` and `decompress(data)`
  using zstd. Failures are logged at debug level and give `b""`.
  Decompressed output is limited to 30 times the input size, clamped to
  between 1 MiB and 64 MiB.
- **`remotekit.addr`**: `mangle` / `demangle` hide an IPv4 `(host, port)`
  from routers by mixing in the current time; `get_version_from_url`
  extracts the version from a name such as `app-1.2.3.exe`;
  `to_socket_addr("host:port")` resolves to the first address.
- **`remotekit.tcp`**: `open_stream(remote_addr, local_addr, ms_timeout)`
  and `new_listener(addr, reuse, handler)` give `FramedStream` objects that
  send and receive framed packets (`send_raw`, `send_bytes`, `next`,
  `next_timeout`, `close`). After `set_key(key)` with a 32-byte key, packets
  sent with `send_raw` and all received packets are sealed with a secret box,
  using a per-direction sequence number as nonce.
- **`remotekit.udp`**: `bind_socket(addr)` and `bind_reuse(addr)` give a
  `FramedSocket` whose `next()` returns `(data, sender)` pairs.

## Install

```
pip install remotekit
```

## Examples

Parse the input DSL:

```python
from remotekit.dsl import tokenize

for token in tokenize("{{Hello}} {+CTRL}hi{-CTRL}"):
    print(token)
```

Frame packets:

```python
from remotekit.bytes_codec import BytesCodec

codec = BytesCodec()
wire = bytearray(codec.encode(b"hello"))
print(codec.decode(wire))  # b'hello'
```

Mangle an address so routers do not rewrite it:

```python
from remotekit.addr import mangle, demangle

data = mangle(("192.168.16.32", 21116))
print(demangle(data))  # ('192.168.16.32', 21116)
```

Exchange framed packets over TCP:

```python
import asyncio
from remotekit.tcp import new_listener, open_stream

async def echo(stream):
    async with stream:
        packet = await stream.next()
        await stream.send_raw(packet)

async def main():
    server = await new_listener(("127.0.0.1", 0), False, echo)
    port = server.sockets[0].getsockname()[1]
    async with await open_stream(("127.0.0.1", port), ("127.0.0.1", 0), 1000) as stream:
        await stream.send_raw(b"ping")
        print(await stream.next())  # b'ping'
    server.close()
    await server.wait_closed()

asyncio.run(main())
```

## What this package does not do

It does not send keyboard or mouse events to the operating system. It
provides the interfaces and the per-platform key tables, but no concrete
controller; to drive real input you implement `KeyboardControllable` and
`MouseControllable` yourself. It has no command-line program, no file
transfer and no message schema on top of the framed streams.

## Tests

```
pip install -e ".[test]"
pytest
```