"""
Pharos Agent Kit LangChain tools

Exposes every registered action as a LangChain tool.
"""

from .agent import create_pharos_agent
from .prompts import PHAROS_SYSTEM_PROMPT
from .tools import PharosTools, action_to_tool, create_pharos_tools

__all__ = [
    "PharosTools",
    "action_to_tool",
    "create_pharos_tools",
    "create_pharos_agent",
    "PHAROS_SYSTEM_PROMPT",
]
