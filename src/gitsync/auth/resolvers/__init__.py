"""Concrete token resolvers."""

from gitsync.auth.resolvers.device_flow import DeviceFlowTokenResolver
from gitsync.auth.resolvers.env import EnvTokenResolver
from gitsync.auth.resolvers.static import PromptTokenResolver, StaticTokenResolver

__all__ = ["DeviceFlowTokenResolver", "EnvTokenResolver", "PromptTokenResolver", "StaticTokenResolver"]
