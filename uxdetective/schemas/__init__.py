"""Input contracts validated before the detection core runs."""

from uxdetective.schemas.snapshot import PageSnapshot

__all__ = ["PageSnapshot"]
