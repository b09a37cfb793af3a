from .jwt_utils import extract_claim_set
from .jwt_verify import InvalidTokenError, JwtVerificationService

__all__ = ["InvalidTokenError", "JwtVerificationService", "extract_claim_set"]
