from functools import wraps
from flask_jwt_extended import get_jwt, verify_jwt_in_request
from flask_jwt_extended.exceptions import NoAuthorizationError
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from classboard.config.settings import ROLE_ADMIN, ROLE_MAIN_ADMIN, ROLE_STUDENT, ROLE_TEACHER
from classboard.utils.logging.log_config import get_logger

logger = get_logger(__name__)

def role_required(*allowed_roles):
    """Decorator to require specific roles for API endpoints"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                verify_jwt_in_request()
                claims = get_jwt()
            except NoAuthorizationError:
                return {"message": "Missing Authorization Header", "error": "NO_AUTH_HEADER"}, 401
            except ExpiredSignatureError:
                return {"message": "Token has expired", "error": "TOKEN_EXPIRED"}, 401
            except InvalidTokenError:
                return {"message": "Invalid token", "error": "INVALID_TOKEN"}, 401
            except Exception as e:
                logger.info(f"Rejected token: {type(e).__name__}")
                return {"message": "Unauthorized access", "error": "UNAUTHORIZED"}, 401

            user_type = claims.get("userType")
            if user_type not in allowed_roles:
                return {"message": f"Access denied. Required roles: {', '.join(allowed_roles)}", "error": "INSUFFICIENT_PERMISSIONS"}, 403

            return f(*args, **kwargs)
        return decorated_function
    return decorator

# Role-specific decorators
def staff_required(f):
    """Decorator for teacher and admin endpoints"""
    return role_required(ROLE_TEACHER, ROLE_ADMIN, ROLE_MAIN_ADMIN)(f)

def leaderbd_required(f):
    """Decorator for endpoints every signed-in role may read"""
    return role_required(ROLE_STUDENT, ROLE_TEACHER, ROLE_ADMIN, ROLE_MAIN_ADMIN)(f)
