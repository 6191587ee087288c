"""Password Hasher Interface"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Hashes and checks admin passwords"""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-effort comparison; False on any mismatch or malformed hash"""
        pass
