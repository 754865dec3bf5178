from .apis import ApiService
from .keys import KeyService

__all__ = ["ApiService", "KeyService"]
