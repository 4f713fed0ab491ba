"""
Agent Registry for the Thief Chase game.

This module provides a registry for the available move-selection strategies.
It allows name-based selection and instantiation of agents for the engine and
for the terminal interface.
"""

import random
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from thief_chase.core.pieces import Player
from .base_agent import PoliceAgent, ThiefAgent
from .heuristic_agent import EscapeThiefAgent, GreedyPoliceAgent
from .minimax_agent import MinimaxPoliceAgent
from .random_agent import RandomThiefAgent


class AgentType(Enum):
    """Available agent types"""
    RANDOM = "random"
    ESCAPE = "escape"
    GREEDY = "greedy"
    MINIMAX = "minimax"


ThiefFactory = Callable[[Optional[random.Random]], ThiefAgent]
PoliceFactory = Callable[[], PoliceAgent]


class AgentRegistry:
    """Registry for managing the thief and police agent implementations"""

    def __init__(self):
        """Initialize the agent registry with available agents"""
        self._thief_agents: Dict[AgentType, Tuple[ThiefFactory, str]] = {
            AgentType.RANDOM: (RandomThiefAgent, "Random thief - Picks any free diagonal move"),
            AgentType.ESCAPE: (lambda rng: EscapeThiefAgent(),
                               "Escape thief - Heads for the goal row while avoiding the police"),
        }

        self._police_agents: Dict[AgentType, Tuple[PoliceFactory, str]] = {
            AgentType.GREEDY: (GreedyPoliceAgent, "Greedy police - Captures first, then closes in without collisions"),
            AgentType.MINIMAX: (MinimaxPoliceAgent, "One-ply police - Tries every move combination against the police heuristic"),
        }

    def get_available_agent_types(self, player: Player) -> List[AgentType]:
        """Get list of agent types available for a player"""
        if player == Player.THIEF:
            return list(self._thief_agents.keys())
        return list(self._police_agents.keys())

    def get_agent_description(self, agent_type: AgentType, player: Player) -> str:
        """Get description of an agent type for a specific player"""
        agents = self._thief_agents if player == Player.THIEF else self._police_agents
        if agent_type not in agents:
            raise ValueError(f"Unknown {player.value} agent type: {agent_type}")
        return agents[agent_type][1]

    def create_thief_agent(self, agent_type: AgentType,
                           rng: Optional[random.Random] = None) -> ThiefAgent:
        """Create a thief agent of the specified type"""
        if agent_type not in self._thief_agents:
            raise ValueError(f"Unknown thief agent type: {agent_type}")
        factory = self._thief_agents[agent_type][0]
        return factory(rng)

    def create_police_agent(self, agent_type: AgentType) -> PoliceAgent:
        """Create a police agent of the specified type"""
        if agent_type not in self._police_agents:
            raise ValueError(f"Unknown police agent type: {agent_type}")
        factory = self._police_agents[agent_type][0]
        return factory()


# Global registry instance
agent_registry = AgentRegistry()


def get_agent_registry() -> AgentRegistry:
    """Get the global agent registry instance"""
    return agent_registry


class AgentSelector:
    """Helper class for listing agents in the terminal interface"""

    @staticmethod
    def get_agent_choices(player: Player) -> List[Tuple[str, str]]:
        """Get (value, description) pairs for a player's agents"""
        registry = get_agent_registry()
        return [(agent_type.value, registry.get_agent_description(agent_type, player))
                for agent_type in registry.get_available_agent_types(player)]

    @staticmethod
    def display_agent_menu(player: Player, title: str = "Available agents") -> None:
        """Print the agents available for a player"""
        print(f"\n{title} ({player.value})")
        print("=" * (len(title) + len(player.value) + 3))
        for value, description in AgentSelector.get_agent_choices(player):
            print(f"  {value:<10} {description}")
