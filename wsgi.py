"""Web Server Gateway Interface entry-point."""

from uhc_auth_proxy.factory import create_app

__flask_app__ = create_app()


def application(environ, start_response):    # type: ignore
    """WSGI application."""
    for key, value in environ.items():
        # uWSGI may pass settings in the environ, alongside request headers
        # that must not end up in the config. Only take known settings.
        if key == 'SERVER_NAME' or key not in __flask_app__.config:
            continue
        __flask_app__.config[key] = value
    return __flask_app__(environ, start_response)
