"""Users app package.

Defines the custom user model with the administrator and customer roles,
the user directory service and the authentication endpoints. Use
``apps.users.models.CustomUser`` as the AUTH_USER_MODEL throughout
the project.
"""
