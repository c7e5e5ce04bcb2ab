"""Radio (DJ) program details."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final

from music163.api.query import QueryField, param
from music163.api.response import Response

from .base import Service
from .models import DjProgramResult

DJ_PROGRAM_PATH: Final[str] = "dj/program/detail"


@dataclass(frozen=True, slots=True)
class DjProgramOptions:
    program_id: int

    QUERY_FIELDS: ClassVar[tuple[QueryField, ...]] = (param("id", "program_id"),)


class DjService(Service):
    """Radio program lookups via ``dj/program/detail``."""

    def get(self, program_id: int) -> tuple[DjProgramResult, Response[DjProgramResult]]:
        return self._get(DJ_PROGRAM_PATH, DjProgramOptions(program_id=int(program_id)), DjProgramResult)


__all__ = ["DJ_PROGRAM_PATH", "DjProgramOptions", "DjService"]
