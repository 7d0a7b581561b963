import logging

import simpy

logger = logging.getLogger(__name__)


class MessageBroker:
    """
    Topic-based publish-subscribe between the tick driver and its listeners.

    Every published message is copied to a broadcast pipe so a recorder
    (see analyzer.Statistics) can observe all traffic. A topic only
    buffers messages once a listener has asked for its pipe; messages on
    a topic nobody subscribed to go to the broadcast pipe alone.
    """
    def __init__(self, env: simpy.Environment):
        self.env = env
        self.topics = {}
        self.broadcast_pipe = simpy.Store(self.env)

    def get_pipe(self, topic: str) -> simpy.Store:
        """Get or create the Store backing a topic (subscribes to it)"""
        if topic not in self.topics:
            self.topics[topic] = simpy.Store(self.env)
        return self.topics[topic]

    def put(self, topic: str, message):
        """
        Publish a message on the broadcast pipe and on a subscribed topic

        Returns:
            The topic's put event, or None when nobody subscribed
        """
        logger.debug("%.2f [Broker] Publish on '%s'", self.env.now, topic)
        self.broadcast_pipe.put({'topic': topic, 'message': message})
        pipe = self.topics.get(topic)
        if pipe is None:
            return None
        return pipe.put(message)

    def get(self, topic: str):
        """Wait for the next message on a topic"""
        return self.get_pipe(topic).get()

    def get_broadcast_pipe(self) -> simpy.Store:
        return self.broadcast_pipe

    def get_current_time(self) -> float:
        return self.env.now
