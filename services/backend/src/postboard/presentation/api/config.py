"""API configuration adapter.

Bridges the centralized postboard_config settings with the API layer.
The settings object is fixed when the application is created and read
back from the application state on each request.
"""

from fastapi import Request

from postboard_config.settings import Settings


def get_api_settings(request: Request) -> Settings:
    """Get the settings the running application was created with."""
    return request.app.state.settings
