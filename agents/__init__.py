"""
Agents package for the Thief Chase game.

This package contains the move-selection strategies for the police and the
thieves, together with the heuristics they rely on.
"""

from .base_agent import Agent, PoliceAgent, ThiefAgent
from .random_agent import RandomThiefAgent
from .heuristic_agent import EscapeThiefAgent, GreedyPoliceAgent, score_police_move
from .minimax_agent import MinimaxPoliceAgent
from .agent_registry import (
    AgentType, AgentRegistry, agent_registry, get_agent_registry, AgentSelector
)
from .heuristics import GameHeuristics

__all__ = [
    'Agent',
    'PoliceAgent',
    'ThiefAgent',
    'RandomThiefAgent',
    'EscapeThiefAgent',
    'GreedyPoliceAgent',
    'score_police_move',
    'MinimaxPoliceAgent',
    'AgentType',
    'AgentRegistry',
    'agent_registry',
    'get_agent_registry',
    'AgentSelector',
    'GameHeuristics'
]
