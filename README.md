# dhkeyxc

A two-party chat over TCP. The two sides agree on a shared secret using
Diffie-Hellman over an RFC 3526 MODP group. The secret is hashed with scrypt
to give an AES-256 key and a 96-bit starting nonce. Every message after that
is encrypted with AES-256-GCM. The nonce goes up by one after each message,
whichever side sent it.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install .[test]
```

## Usage

Start the server first. It binds to the configured address and port and
waits for one client:

```
dh-key-xc -s
```

Then start the client in another terminal:

```
dh-key-xc -c
```

The server chooses the prime and sends `p` and `g` to the client. Each side
then sends its public value, and both derive the AES key. The client sends
the first message, and after that the two sides take turns. A message must
be printable ASCII (codes 32 to 126). Any other input is refused and the
prompt `>> ` is shown again.

The session ends when the other side closes the connection, when a message
fails to arrive or to decrypt, or when standard input ends.

### Options

| Option | Meaning |
| --- | --- |
| `-s`, `--server` | Run as the server |
| `-c`, `--client` | Run as the client |
| `--ip <addr>` | IPv4 address to bind to or connect to (default `127.0.0.1`) |
| `--port <n>` | TCP port, 1024 to 65535 (default `65000`) |
| `--bits <n>` | Size of the prime p: 1536, 2048, 3072, 4096, 6144 or 8192 (default `2048`). Only the server's value is used. |
| `-q`, `--quiet` | Hide warning and info messages |
| `-v`, `--verbose` | Print every message, including the detailed log messages |
| `-d`, `--debug` | Also append every message to the log file |
| `--log <path>` | Log file used in debug mode (default `log`) |
| `-h`, `--help` | Print usage and exit |

Short flags can be combined in a single argument. For example, `dh-key-xc -sdq`
runs a quiet server that writes a debug log.

You must give `-s` or `-c`. If you give neither, the program stops with an
error. If several role flags appear as separate arguments, the last one
wins. A single argument that holds both `s` and `c`, such as `-sc`, is an
error.

An IP address, port, bit size or log path that is not valid produces a
warning, and the default is kept. A `--bits` or `--port` value that is not a
number is an error.

The command exits with status 0 when the session ends normally. It exits
with status 1 after showing help, on bad arguments, or when connecting, the
handshake or key derivation fails.

In debug mode the log file is opened for appending. It starts with a
timestamp line. Messages are held in a buffer and written to the file when
the buffer fills and when the program exits.

## Wire format

Each frame starts with its length as 4 bytes, big-endian, and the payload
follows. During the handshake the server sends `p||g`, with both numbers in
lowercase hex. The client answers with its public value in hex, and the
server replies with its own. Chat messages are sent as `tag||ciphertext`,
each part as lowercase hex with two digits per byte.

## Library use

You can also use the parts on their own:

- `dhkeyxc.params`: the `ConfigParams`, `DHParams` and `AESParams` dataclasses, and `ExchangeError`, which is raised when a step fails.
- `dhkeyxc.primes`: `vetted_p(bits)` returns the RFC 3526 prime as an `int`, and `vetted_g()` returns the generator 2.
- `dhkeyxc.dhmath`: `select_public_dh_params`, `private_a`, `public_a` and `dh_key` fill in a `DHParams`.
- `dhkeyxc.aes`: `aes_keygen(dh)` derives an `AESParams` with scrypt (N=2^20, r=8, p=1). `aes_encrypt(plaintext, aes)` returns `(ciphertext, tag)`, and `aes_decrypt(ciphertext, tag, aes)` returns the plaintext. Neither one advances the nonce.
- `dhkeyxc.formatting`: hex helpers (`itoh`, `htoi`, `stoh`, `htos`) and `format_message` / `parse_message` for `||`-joined fields.
- `dhkeyxc.framing`: `send_frame` and `recv_frame` for length-prefixed frames.
- `dhkeyxc.transport`, `dhkeyxc.messaging` and `dhkeyxc.handshake`: socket set-up, plain and encrypted messages, and the handshake for either side.
- `dhkeyxc.run.dh_aes_kxc(config)`: runs a whole session, and `dhkeyxc.cli.main(argv)` is the command's entry point.
- `dhkeyxc.logger.get_logger()`: returns the shared `Logger`.

## Limitations

- The exchange does not authenticate the other side, so it does not protect against a man in the middle.
- Only IPv4 is supported. The server accepts exactly one client and then stops listening.
- With these scrypt settings, key derivation uses about 1 GiB of memory and may take a few seconds.