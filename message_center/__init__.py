"""Message Center: in-memory message API and client data layer.

The server side lives in :mod:`message_center.app`; the client data layer
in :mod:`message_center.client`::

    from message_center.client import MessageAPIClient, MessageCenterStore
"""

__version__ = "0.1.0"
