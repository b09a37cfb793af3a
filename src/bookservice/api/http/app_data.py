from dataclasses import dataclass

from src.bookservice.core.security import RequiredClaim
from src.bookservice.core.services import DbSessionService, JwtVerificationService
from src.bookservice.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    config: ConfigData
    database_service: DbSessionService
    jwt_verify_service: JwtVerificationService

    @property
    def admin_claim(self) -> RequiredClaim:
        auth = self.config.authorization
        return RequiredClaim(type=auth.admin_claim_type, value=auth.admin_claim_value)
