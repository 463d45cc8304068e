# src/patternlab/patterns/mediator.py
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..observers.notifier import Notifier
from .display import Display

OUTPUT_SLOT = "mediatorOutput"


class UnknownParticipantError(KeyError):
    pass


class Participant:
    """Talks to the others only through its mediator."""

    def __init__(self, name: str, mediator: Mediator, display: Optional[Display] = None):
        self.name = name
        self.display = display
        self.inbox: List[Tuple[str, str]] = []
        self._mediator = mediator
        mediator.register(self)

    def send(self, message: str) -> List[str]:
        return self._mediator.notify(self, message)

    def receive(self, sender: str, message: str) -> None:
        self.inbox.append((sender, message))
        if self.display is not None:
            self.display.set_text(OUTPUT_SLOT, f"{self.name} received: {message}")


class Mediator:
    """
    Routes a message to every registered participant except its sender.

    Recipients are plain subscribers on a Notifier, so routing never looks
    at what kind of participant it is talking to.
    """

    def __init__(self) -> None:
        self._participants: Dict[str, Participant] = {}
        self._channel: Notifier[Tuple[str, str]] = Notifier()

    def register(self, participant: Participant) -> None:
        if participant.name in self._participants:
            raise ValueError(f"participant '{participant.name}' is already registered")
        self._participants[participant.name] = participant
        self._channel.subscribe(self._deliver_to(participant))

    def participants(self) -> List[str]:
        return list(self._participants)

    def _deliver_to(self, participant: Participant):
        def deliver(envelope: Tuple[str, str]) -> None:
            sender, message = envelope
            if sender != participant.name:
                participant.receive(sender, message)
        return deliver

    def notify(self, sender: Participant, message: str) -> List[str]:
        if self._participants.get(sender.name) is not sender:
            raise UnknownParticipantError(sender.name)
        self._channel.publish((sender.name, message))
        return [n for n in self._participants if n != sender.name]


def send_mediated_message(message: str, display: Display) -> List[str]:
    mediator = Mediator()
    user1 = Participant("User1", mediator, display)
    Participant("User2", mediator, display)
    return user1.send(message)
