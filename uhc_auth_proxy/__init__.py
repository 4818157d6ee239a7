"""
Authentication-translation proxy for cluster registrations.

The proxy is a Flask application that handles registration requests from the
support operator running inside a cluster. The operator identifies itself with
a user-agent of the form ``support-operator/<commit> cluster/<cluster_id>`` and
presents the cluster's pull-secret token as a bearer token.

The proxy extracts both values (see :mod:`uhc_auth_proxy.identity`), exchanges
them with the cluster manager's registration API (see
:mod:`uhc_auth_proxy.services.cluster`), and relays the identity document that
the cluster manager returns. Calls to the cluster manager are authenticated
with a service-level offline access token (see
:mod:`uhc_auth_proxy.services.client`).

Malformed identity material is rejected with 400 (Bad Request) before any
upstream call is made. A failed exchange is reported as 401 (Unauthorized).
"""
