"""An interactive TCP chat client."""

from __future__ import annotations

import re
import socket
import sys
from typing import TextIO

BUFFER_SIZE = 1024

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ClientError(Exception):
    """Raised when the client cannot be set up or connect."""


def parse_port(text: str) -> int:
    """Read a port number from the start of ``text``."""
    match = _LEADING_INT.match(text)
    port = int(match.group(1)) if match else 0
    if port <= 0 or port > 65535:
        raise ClientError("ERROR, invalid port number")
    return port


def connect(host: str, port: int) -> socket.socket:
    """Resolve ``host`` and open a TCP connection to it."""
    try:
        address = socket.gethostbyname(host)
    except (socket.gaierror, socket.herror, UnicodeError) as exc:
        raise ClientError("ERROR, no such host") from exc
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.connect((address, port))
    except OSError as exc:
        sock.close()
        raise ClientError(f"ERROR connecting: {exc.strerror or exc}") from exc
    return sock


def chat(sock: socket.socket, stdin: TextIO, stdout: TextIO) -> None:
    """Send lines from ``stdin`` and show each reply until "Bye" or end of input."""
    while True:
        stdout.write("You: ")
        stdout.flush()
        line = stdin.readline(BUFFER_SIZE - 1)
        if not line:
            break
        try:
            sock.sendall(line.encode("utf-8"))
        except OSError as exc:
            raise ClientError(f"ERROR writing to socket: {exc}") from exc
        if line.startswith("Bye"):
            stdout.write("Exiting Client...\n")
            break
        try:
            data = sock.recv(BUFFER_SIZE - 1)
        except OSError as exc:
            raise ClientError(f"ERROR reading from socket: {exc}") from exc
        stdout.write(f"Server: {data.decode('utf-8', errors='replace')}\n")
        if not data:
            break


def main(argv: list[str] | None = None) -> int:
    """Connect to a chat server and talk to it from the terminal."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Usage: chat_client hostname port", file=sys.stderr)
        return 1
    host, port_text = args[0], args[1]
    try:
        port = parse_port(port_text)
        with connect(host, port) as sock:
            print("Connected to the server...")
            chat(sock, sys.stdin, sys.stdout)
    except ClientError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())