"""
Transport adapter interface

Common interface implemented by every transport (stdio, ZeroMQ). A transport
frames inbound messages, hands each one to ``Server.handle_message`` and writes
back any reply; it owns no protocol logic.
"""

import abc


class TransportAdapterInterface(abc.ABC):
    """Interface every transport adapter must implement"""

    @abc.abstractmethod
    def start(self, threaded: bool = True):
        """Start serving messages

        Args:
            threaded: Run in a background thread instead of blocking the caller
        """
        pass

    @abc.abstractmethod
    def stop(self):
        """Stop serving and release resources"""
        pass
