from dataclasses import dataclass

from src.orders_api.core.services import DbSessionService, PasswordService
from src.orders_api.core.services.jwt import JwtGeneratorService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    password_service: PasswordService
    jwt_generation_service: JwtGeneratorService
