# banana/profiles/__init__.py

from .base import Profile, NoneProfile
from .vocabulary import VocabularyProfile
from .pb import PB, PerspectiveBroker
from .loader import VocabularyLoader, load_vocabulary
from .registry import ProfileRegistry, get_profile, register_profile

__all__ = [
    "Profile", "NoneProfile", "VocabularyProfile",
    "PB", "PerspectiveBroker",
    "VocabularyLoader", "load_vocabulary",
    "ProfileRegistry", "get_profile", "register_profile",
]
