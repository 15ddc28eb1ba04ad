"""OneLogin API v1 endpoint templates."""

BASE_URL = "https://api.{region}.onelogin.com"
DEFAULT_REGION = "us"

# Largest page the server returns for list endpoints
MAX_PAGE_SIZE = 50

# OAuth 2.0 tokens
TOKEN_REQUEST_URL = "/auth/oauth2/token"
TOKEN_REVOKE_URL = "/auth/oauth2/revoke"
GET_RATE_URL = "/auth/rate_limit"

# Users
GET_USERS_URL = "/api/1/users"
GET_USER_URL = "/api/1/users/{}"
GET_APPS_FOR_USER_URL = "/api/1/users/{}/apps"
GET_ROLES_FOR_USER_URL = "/api/1/users/{}/roles"
GET_CUSTOM_ATTRIBUTES_URL = "/api/1/users/custom_attributes"
CREATE_USER_URL = "/api/1/users"
UPDATE_USER_URL = "/api/1/users/{}"
DELETE_USER_URL = "/api/1/users/{}"
ADD_ROLE_TO_USER_URL = "/api/1/users/{}/add_roles"
DELETE_ROLE_TO_USER_URL = "/api/1/users/{}/remove_roles"
SET_PW_CLEARTEXT = "/api/1/users/set_password_clear_text/{}"
SET_PW_SALT = "/api/1/users/set_password_using_salt/{}"
SET_CUSTOM_ATTRIBUTE_TO_USER_URL = "/api/1/users/{}/set_custom_attributes"
LOG_USER_OUT_URL = "/api/1/users/{}/logout"
LOCK_USER_URL = "/api/1/users/{}/lock_user"

# Login
SESSION_LOGIN_TOKEN_URL = "/api/1/login/auth"
GET_TOKEN_VERIFY_FACTOR = "/api/1/login/verify_factor"

# Roles
GET_ROLES_URL = "/api/1/roles"
GET_ROLE_URL = "/api/1/roles/{}"

# Events
GET_EVENT_TYPES_URL = "/api/1/events/types"
GET_EVENTS_URL = "/api/1/events"
GET_EVENT_URL = "/api/1/events/{}"
CREATE_EVENT_URL = "/api/1/events"

# Groups
GET_GROUPS_URL = "/api/1/groups"
GET_GROUP_URL = "/api/1/groups/{}"

# SAML assertions
GET_SAML_ASSERTION_URL = "/api/1/saml_assertion"
GET_SAML_VERIFY_FACTOR = "/api/1/saml_assertion/verify_factor"

# Invite links
GENERATE_INVITE_LINK_URL = "/api/1/invites/get_invite_link"
SEND_INVITE_LINK_URL = "/api/1/invites/send_invite_link"

# Embed apps (legacy XML endpoint, not region specific)
EMBED_APP_URL = "https://api.onelogin.com/client/apps/embed2"

SESSION_SUCCESS_MESSAGE = "Success"
SESSION_MFA_MESSAGE = "MFA is required for this user"
