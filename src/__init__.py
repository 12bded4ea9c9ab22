"""
Agent Conversation Demos

Scripted conversations between LLM agents: a writer/critic reflection
loop and a writer reviewed by a nested panel of critics.
"""

__version__ = "1.0.0"
__author__ = "Agent Demos Team"
