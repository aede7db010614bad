from dataclasses import dataclass

from src.user_registry.core.services import Clock, DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    clock: Clock
