"""
Application-wide constants.

Centralizes magic numbers and strings to improve maintainability.
"""

# =============================================================================
# Tag Constraints
# =============================================================================

TAG_NAME_MIN_LENGTH = 1
TAG_NAME_MAX_LENGTH = 36

# "#" followed by exactly six hex digits
HEX_COLOR_PATTERN = r"#[0-9a-fA-F]{6}"

# Path identifiers: lowercase letters, digits and hyphens
ID_PATH_PATTERN = r"^[a-z0-9\-]+$"

# =============================================================================
# Authentication
# =============================================================================

ACCESS_TOKEN_COOKIE = "access_token"

# =============================================================================
# Error Messages
# =============================================================================


class ErrorMessages:
    """Standardized error messages for client exceptions."""

    TAG_NOT_FOUND = "Tag not found: {}"
    TAG_ALREADY_EXISTS = "Tag already exists: {}"

    FORBIDDEN = "You don't have access to this resource"
    INVALID_CREDENTIALS = "Wrong email or password"
    SETUP_COMPLETED = "An account already exists, log in instead"

    FIELD_REQUIRED = "{} must be set"
    FIELD_TOO_SHORT = "{} must be more than {} characters"
    FIELD_TOO_LONG = "{} must be less than {} characters"
    FIELD_NOT_HEX_COLOR = "{} must be an hexadecimal color code"
