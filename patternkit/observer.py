"""Observer: a channel notifying its subscribers of new videos."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Subscriber(ABC):
    """Anything that wants to hear about uploaded videos."""

    @abstractmethod
    def notify(self, video_name: str) -> str:
        """React to a new video; return the notification text."""


class User(Subscriber):
    """A named viewer."""

    def __init__(self, name: str) -> None:
        self.name = name

    def notify(self, video_name: str) -> str:
        return f"{self.name} got notification: {video_name}"


class YoutubeChannel:
    """The subject: keeps subscribers and notifies them on upload."""

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        return tuple(self._subscribers)

    def subscribe(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        """Remove every subscription of ``subscriber``; unknown ones are ignored."""
        self._subscribers = [s for s in self._subscribers if s is not subscriber]

    def upload_video(self, video_name: str) -> list[str]:
        """Announce a video and notify all subscribers, returning every line."""
        return [f"Channel uploaded: {video_name}", *self._notify_all(video_name)]

    def _notify_all(self, video_name: str) -> list[str]:
        return [subscriber.notify(video_name) for subscriber in self._subscribers]


def main(argv=None) -> int:
    """Upload two videos to a channel whose audience changes in between."""
    channel = YoutubeChannel()
    pramod, pradeep, david, caprio = (
        User(name) for name in ("Pramod", "Pradeep", "David", "Caprio")
    )
    for user in (pramod, pradeep, caprio):
        channel.subscribe(user)
    for line in channel.upload_video("Observer Pattern Explained"):
        print(line)
    channel.subscribe(david)
    for line in channel.upload_video("Factory Pattern Explained"):
        print(line)
    channel.unsubscribe(caprio)
    return 0