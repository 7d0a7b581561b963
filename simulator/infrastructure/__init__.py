"""Infrastructure components for simulation"""

from .message_broker import MessageBroker
from .realtime_env import RealtimeEnvironment
from .tick_driver import TickDriver

__all__ = [
    'MessageBroker',
    'RealtimeEnvironment',
    'TickDriver',
]
