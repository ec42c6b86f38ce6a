"""Operating-systems teaching demos: CPU scheduling simulation and a TCP chat server and client."""

__version__ = "0.1.0"
__all__ = ["scheduling", "chat_server", "chat_client"]