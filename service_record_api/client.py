"""Service Record Parquet API client.

A thin wrapper around the HTTP API built on ``requests``.  Every call
returns a tuple ``(data, error)``: on success ``error`` is ``None``; on
failure ``data`` is ``None`` and ``error`` is a dictionary with the
keys ``status_code`` and ``message``.  The client never raises for
HTTP or transport errors.

Command line usage::

    service-record-client --url http://localhost:8000 \\
        --id 1 --name svc-a --service-name alpha --status UP
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/parquet/generate"


class ServiceRecordClient:
    """Client for the Service Record Parquet API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
        """Perform an HTTP request and return the plain-text body.

        Args:
            method: HTTP method (``GET``, ``POST``, ...).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(text, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def generate(self, record: Dict[str, Any]) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
        """Post a service record and let the server write it to Parquet.

        Args:
            record: Mapping with ``id``, ``name``, ``serviceName`` and
                ``status``.
        Returns:
            A tuple ``(message, error)`` where ``message`` is the
            server's confirmation text.
        """
        return self._request("POST", GENERATE_PATH, json_body=record)


def main(argv: Optional[list] = None) -> int:
    ap = argparse.ArgumentParser(description="Send a service record to the Parquet API.")
    ap.add_argument("--url", default="http://localhost:8000", help="Base URL of the API")
    ap.add_argument("--id", required=True, help="Record id")
    ap.add_argument("--name", required=True, help="Record name")
    ap.add_argument("--service-name", required=True, help="Service name")
    ap.add_argument("--status", required=True, help="Service status")
    args = ap.parse_args(argv)

    client = ServiceRecordClient(base_url=args.url)
    message, error = client.generate(
        {
            "id": args.id,
            "name": args.name,
            "serviceName": args.service_name,
            "status": args.status,
        }
    )
    if error:
        print(f"[!] {error['message']} (status: {error['status_code']})", file=sys.stderr)
        return 1
    print(f"[+] {message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
