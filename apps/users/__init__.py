"""Users app package.

Defines the custom user model with the user/agent/admin roles together
with the authentication endpoints (JWT register/login/logout and
Firebase sign-in). Use ``apps.users.models.CustomUser`` as the
AUTH_USER_MODEL throughout the project.
"""
