"""Stockroom load testing, Locust entry point.

Usage:
    # All users (web UI):
    locust -f loadtests/locustfile.py

    # Storekeepers only:
    locust -f loadtests/locustfile.py StorekeeperUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py --headless -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.goods import ReportViewerUser, StorekeeperUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log the API error body of every failed request."""
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, extract_error_detail(response))


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Print the container and sales statistics when the run ends."""
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    try:
        stats = requests.get(f"{environment.host}/reports/statistics", timeout=5).json()
        print("[LOADTEST] Final container statistics:")
        for key, value in stats.items():
            print(f"  {key}: {value}")
        print()
    except requests.RequestException as e:
        print(f"[LOADTEST] Could not fetch statistics: {e}\n")
