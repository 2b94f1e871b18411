"""
CLI Client Module.

Command-line client built with Typer for administering namespaces
through the admin HTTP API.

Architecture:
- CLI is a thin presentation layer
- All namespace state lives in the remote service
- CLI calls the service via HTTP (httpx), one request per invocation
- Output is rendered as plain text or JSON (--format)

Usage:
    nsadmin --help
    nsadmin http://127.0.0.1:8081 stats db1 -i
    nsadmin http://127.0.0.1:8081 --format json create-namespace db2
"""
