"""Flask configuration for the auth proxy."""

import os

OFFLINE_ACCESS_TOKEN = os.environ.get('OFFLINE_ACCESS_TOKEN')
"""Service-level token used to authenticate to the cluster manager."""

UHC_REGISTRATION_URL = os.environ.get(
    'UHC_REGISTRATION_URL',
    'https://api.openshift.com/api/accounts_mgmt/v1/cluster_registrations'
)
"""Endpoint that resolves a cluster id and pull-secret token to an identity."""

UPSTREAM_TIMEOUT = os.environ.get('UPSTREAM_TIMEOUT', '10')
"""Seconds to wait on the cluster manager. Empty means wait indefinitely."""

REQUEST_ID_HEADER = os.environ.get('REQUEST_ID_HEADER',
                                   'x-rh-insights-request-id')

LOGLEVEL = os.environ.get('LOGLEVEL', 'INFO')
PORT = int(os.environ.get('PORT', '3000'))

TRUSTED_PROXIES = int(os.environ.get('TRUSTED_PROXIES', '1'))
"""Number of proxies in front of the app whose X-Forwarded-For is trusted."""
