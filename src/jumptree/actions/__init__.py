"""Action handler mixins for JumpTreeApp."""

from .navigation_actions import NavigationActionsMixin

__all__ = [
    "NavigationActionsMixin",
]
