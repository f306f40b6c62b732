# banana/profiles/registry.py
from __future__ import annotations

from typing import Dict, Optional

from .base import Profile, NoneProfile
from .pb import PerspectiveBroker


class ProfileRegistry:
    """
    Maps profile names -> profile instances.

    Names are case-insensitive.
    """

    def __init__(self, profiles: Optional[Dict[str, Profile]] = None):
        self._profiles: Dict[str, Profile] = {k.lower(): v for k, v in (profiles or {}).items()}

    @classmethod
    def default(cls) -> "ProfileRegistry":
        return cls(
            profiles={
                "none": NoneProfile(),
                "pb": PerspectiveBroker,
            }
        )

    def has(self, name: str) -> bool:
        return name.lower() in self._profiles

    def register(self, profile: Profile, *, replace: bool = False) -> None:
        key = profile.name.lower()
        if key in self._profiles and not replace:
            raise ValueError(f"Profile '{profile.name}' is already registered")
        self._profiles[key] = profile

    def get(self, name: str) -> Profile:
        key = name.lower()
        if key not in self._profiles:
            known = ", ".join(self.names()) or "<none>"
            raise KeyError(f"Unknown profile '{name}' (known: {known})")
        return self._profiles[key]

    def names(self) -> list[str]:
        return sorted(self._profiles)


REGISTRY = ProfileRegistry.default()


def get_profile(name: str) -> Profile:
    return REGISTRY.get(name)


def register_profile(profile: Profile, *, replace: bool = False) -> None:
    REGISTRY.register(profile, replace=replace)
