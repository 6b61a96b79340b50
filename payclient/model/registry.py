"""Registry of record classes keyed by the API's ``object`` discriminator."""
import logging
from typing import Dict, Optional, Type

logger = logging.getLogger(__name__)


class ObjectRegistry:
    """Maps discriminator tags (e.g. ``"bank_account"``) to record classes."""

    def __init__(self):
        """Initialize registry."""
        self.classes: Dict[str, Type] = {}

    def register(self, object_name: str):
        """Class decorator registering a record class under ``object_name``."""

        def decorator(cls):
            if object_name in self.classes and self.classes[object_name] is not cls:
                logger.warning(
                    f"Replacing {self.classes[object_name].__name__} with "
                    f"{cls.__name__} for object '{object_name}'"
                )
            self.classes[object_name] = cls
            return cls

        return decorator

    def get(self, object_name: Optional[str], default: Type) -> Type:
        """Get class for a tag, or ``default`` when the tag is unknown."""
        if object_name is None:
            return default
        return self.classes.get(object_name, default)

    def __contains__(self, object_name: str) -> bool:
        return object_name in self.classes


# Global instance
object_registry = ObjectRegistry()
