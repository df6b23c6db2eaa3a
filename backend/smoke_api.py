"""
Scope Sentry API smoke test.

Hits a running server over HTTP with realistic scope-of-work samples.

Usage:
    uvicorn main:app --port 8081          # or MOCK_MODE=true for no API key
    python smoke_api.py
    API_URL=https://example.com python smoke_api.py
"""

import json
import os
import sys
from dataclasses import dataclass
from typing import Optional

import requests

BASE_URL = os.environ.get("API_URL", "http://localhost:8081")

LABELS = {"Low Risk", "Moderate Risk", "High Risk", "Critical Risk"}
SEVERITIES = {"low", "medium", "high"}

# Sample documents
MESSY_SOW_EMAIL = """fwd: project scope

hey, can u look at this before I sign?? seems fine but idk

---
SCOPE OF WORK
Client: Artisanal Pickle Co LLC
Freelancer: Mike R.

We need a new website + all necessary assets and related materials.
Freelancer agrees to a reasonable number of revisions.
Timeline: ongoing until launch.
Fee: $4,250, paid upon completion to client's satisfaction.

thx
-mike"""

SOLID_CONTRACT = """INDEPENDENT CONTRACTOR AGREEMENT

Deliverables: 5 page designs (Figma), 1 brand guide (PDF), source files (AI/PSD).
Revisions: up to 3 rounds; additional rounds billed at $90/hour.
Timeline: delivery by March 31.
Payment: 50% deposit on signing, balance due Net 15 from final delivery.
Kill fee: 50% of remaining fee if Client cancels after kickoff.
Intellectual property transfers to Client upon full payment.
Termination: either party may terminate with 14 days written notice."""

GIBBERISH_DOCUMENT = """asdfkjhasdf 12938471 !!!@@@###
banana helicopter submarine"""


@dataclass
class SmokeResult:
    name: str
    passed: bool
    message: str
    response_data: Optional[dict] = None


class ScopeSentrySmoke:
    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url
        self.results: list[SmokeResult] = []

    def run_all(self):
        print("\n" + "=" * 60)
        print("SCOPE SENTRY API SMOKE TEST")
        print("=" * 60 + "\n")

        self.check_health()
        self.check_analysis("Messy SOW Email", MESSY_SOW_EMAIL, expect_flags=True)
        self.check_analysis("Solid Contract", SOLID_CONTRACT)
        self.check_analysis("Gibberish", GIBBERISH_DOCUMENT, expect_empty=True)
        self.check_error("Empty Text", {"text": ""}, 400)
        self.check_error("Whitespace Text", {"text": "   \n "}, 400)
        self.check_error("Missing Text Field", {"contract_text": "SOW"}, 400)

        self.print_summary()
        return self.results

    def _request(self, method: str, endpoint: str, data: dict = None) -> tuple[int, dict]:
        """Make HTTP request and return status code and response"""
        url = f"{self.base_url}{endpoint}"
        try:
            if method == "GET":
                resp = requests.get(url, timeout=60)
            else:
                resp = requests.post(url, json=data, timeout=120)
        except requests.exceptions.ConnectionError:
            return 0, {"error": "Connection refused - is the server running?"}
        except requests.exceptions.Timeout:
            return 0, {"error": "Request timed out"}
        try:
            return resp.status_code, resp.json() if resp.text else {}
        except json.JSONDecodeError:
            return resp.status_code, {"error": "Invalid JSON response", "raw": resp.text[:500]}

    def _add(self, name: str, passed: bool, message: str, data: dict = None):
        self.results.append(SmokeResult(name, passed, message, data))
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"{status}: {name}")
        if not passed:
            print(f"       {message}")
            if data:
                print(f"       Response: {json.dumps(data, indent=2)[:200]}...")

    def check_health(self):
        status, data = self._request("GET", "/")
        passed = status == 200 and data.get("status") == "online"
        self._add("Health Check", passed, f"Expected 200/online, got {status}", data)

    def check_analysis(self, name: str, text: str, expect_flags: bool = False, expect_empty: bool = False):
        status, data = self._request("POST", "/api/analyze", {"text": text})
        if status != 200:
            self._add(name, False, f"Expected 200, got {status}", data)
            return

        problems = []
        if not isinstance(data.get("score"), int) or not 0 <= data["score"] <= 100:
            problems.append("score out of range")
        if data.get("label") not in LABELS:
            problems.append(f"unknown label {data.get('label')!r}")
        flags = data.get("flags", [])
        if len(flags) > 8:
            problems.append(f"{len(flags)} flags")
        if any(f.get("severity") not in SEVERITIES for f in flags):
            problems.append("unknown severity")
        if expect_flags and not flags:
            problems.append("expected red flags")
        if expect_empty and (flags or data.get("score") != 0):
            problems.append("expected score 0 with no flags")

        self._add(name, not problems, ", ".join(problems), data)

    def check_error(self, name: str, body: dict, expected_status: int):
        status, data = self._request("POST", "/api/analyze", body)
        passed = status == expected_status and isinstance(data.get("error"), str)
        self._add(name, passed, f"Expected {expected_status} with error, got {status}", data)

    def print_summary(self):
        total = len(self.results)
        passed = sum(1 for r in self.results if r.passed)
        print("\n" + "=" * 60)
        print(f"Total: {total} | Passed: {passed} | Failed: {total - passed}")
        print("=" * 60)


if __name__ == "__main__":
    results = ScopeSentrySmoke().run_all()
    sys.exit(0 if all(r.passed for r in results) else 1)
