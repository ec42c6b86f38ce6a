"""A threaded TCP chat server that relays each message to the other clients."""

from __future__ import annotations

import argparse
import socket
import sys
import threading

PORT = 9090
MAX_CLIENTS = 10
BUFFER_SIZE = 1024


def is_farewell(message: bytes | str) -> bool:
    """Tell whether a message asks to end the conversation."""
    if isinstance(message, str):
        return message.startswith("Bye")
    return message.startswith(b"Bye")


class ChatServer:
    """Accepts clients and forwards every message to all other clients."""

    def __init__(self, host: str = "", port: int = PORT, max_clients: int = MAX_CLIENTS):
        self.host = host
        self.port = port
        self.max_clients = max_clients
        self.address: tuple[str, int] | None = None
        self._listener: socket.socket | None = None
        self._clients: list[socket.socket] = []
        self._lock = threading.Lock()
        self._closed = threading.Event()

    def start(self) -> None:
        """Bind and listen."""
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            listener.bind((self.host, self.port))
            listener.listen(self.max_clients)
            listener.settimeout(0.2)
        except OSError:
            listener.close()
            raise
        self._listener = listener
        self.address = listener.getsockname()
        print(f"Server running on port {self.address[1]}...")

    def serve_forever(self) -> None:
        """Accept clients until closed, each handled on its own thread."""
        if self._listener is None:
            self.start()
        assert self._listener is not None
        print("Waiting for clients...")
        while not self._closed.is_set():
            try:
                conn, _ = self._listener.accept()
            except socket.timeout:
                continue
            except OSError as exc:
                if self._closed.is_set():
                    break
                print(f"ERROR accepting connection: {exc}", file=sys.stderr)
                continue
            conn.settimeout(None)
            with self._lock:
                full = len(self._clients) >= self.max_clients
                if not full:
                    self._clients.append(conn)
            if full:
                print("Client limit reached, refusing connection", file=sys.stderr)
                conn.close()
                continue
            print(f"New client connected: {conn.fileno()}")
            threading.Thread(target=self.handle_client, args=(conn,), daemon=True).start()
            print("Waiting for clients...")

    def handle_client(self, conn: socket.socket) -> None:
        """Relay messages from one client until it leaves."""
        client_id = conn.fileno()
        print(f"Client handler started for client: {client_id}")
        try:
            while True:
                try:
                    data = conn.recv(BUFFER_SIZE - 1)
                except OSError:
                    data = b""
                if not data:
                    print(f"Client disconnected: {client_id}")
                    break
                text = data.decode("utf-8", errors="replace")
                print(f"Message from client {client_id}: {text}", end="")
                if is_farewell(data):
                    print(f"Client {client_id} exiting.")
                    break
                self.broadcast(conn, data)
        finally:
            self._remove(conn)
            conn.close()

    def broadcast(self, sender: socket.socket | None, message: bytes) -> None:
        """Send ``message`` to every client other than ``sender``."""
        payload = (b"Server: " + message)[: BUFFER_SIZE - 1]
        with self._lock:
            for client in self._clients:
                if client is sender:
                    continue
                try:
                    client.sendall(payload)
                except OSError:
                    pass

    def client_count(self) -> int:
        """Number of connected clients."""
        with self._lock:
            return len(self._clients)

    def _remove(self, conn: socket.socket) -> None:
        with self._lock:
            if conn in self._clients:
                self._clients.remove(conn)

    def close(self) -> None:
        """Stop accepting and disconnect all clients."""
        self._closed.set()
        if self._listener is not None:
            self._listener.close()
        with self._lock:
            clients = list(self._clients)
        for client in clients:
            try:
                client.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass

    def __enter__(self) -> ChatServer:
        if self._listener is None:
            self.start()
        return self

    def __exit__(self, *args) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Run the chat server."""
    parser = argparse.ArgumentParser(description="Relay chat messages between clients.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--max-clients", type=int, default=MAX_CLIENTS)
    args = parser.parse_args(argv)
    server = ChatServer(args.host, args.port, args.max_clients)
    try:
        server.start()
    except OSError as exc:
        print(f"ERROR binding socket: {exc}", file=sys.stderr)
        return 1
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())