"""Runs the auth proxy for development purposes."""

from uhc_auth_proxy.factory import create_app

app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=app.config['PORT'])
