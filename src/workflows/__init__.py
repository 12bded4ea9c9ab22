"""The demo workflows."""

from .base import BaseWorkflow
from .argumentary import ArgumentaryWorkflow
from .multi_critic import MultiCriticWorkflow

WORKFLOWS = {
    "argumentary": ArgumentaryWorkflow,
    "multi_critic": MultiCriticWorkflow
}

__all__ = [
    "BaseWorkflow",
    "ArgumentaryWorkflow",
    "MultiCriticWorkflow",
    "WORKFLOWS"
]
