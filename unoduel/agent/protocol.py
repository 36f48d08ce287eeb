"""Agent protocol - interface that the opponent strategy and stand-in humans implement."""

from typing import Protocol

from unoduel.engine import Action, PlayerView


class AgentProtocol(Protocol):
    """Interface for UNO duel agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_action(self, player_view: PlayerView) -> Action:
        """Choose exactly one action given the player view.

        Args:
            player_view: Filtered view with only this agent's hand and public info.

        Returns:
            A PlayCard for a card in player_view.my_hand, or DrawCard.
        """
        ...
