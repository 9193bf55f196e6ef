"""
utils/constants.py

Purpose: Centralized static content

- Response bodies returned to callers
- Notification subjects and body templates

(Prevents hardcoding across the codebase)
"""

# ============================================================
# RESPONSE BODIES
# ============================================================

GREETING_MESSAGE = "HELLO WORLD!"
USER_NOT_FOUND_MESSAGE = "User not found"
METHOD_NOT_ALLOWED_MESSAGE = "Method Not Allowed"
NO_METHOD_MESSAGE = "no method"
MISSING_ID_MESSAGE = "missing path parameter: id"

# ============================================================
# NOTIFICATIONS
# ============================================================

USER_CREATED_SUBJECT = "New user created"

USER_CREATED_BODY = """New user: {name}
{id}"""

USER_CHANGED_SUBJECT = "User data changed"

USER_CHANGED_BODY = """Old data: {old_name}, {old_email}
New data: {name}, {email}
ID:{id}"""
