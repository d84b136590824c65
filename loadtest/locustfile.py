"""Load testing script for the agent relay API using Locust.

Run with: locust -f loadtest/locustfile.py --host=http://localhost:5000

Or headless mode:
    locust -f loadtest/locustfile.py --host=http://localhost:5000 \
           --headless -u 10 -r 2 -t 60s

Every query and workflow call is a real Gemini request; keep user counts
within the API key's quota.
"""

import random

from locust import HttpUser, between, task

QUERIES = [
    "What is workflow automation?",
    "Summarise the BMAD method in two sentences.",
    "How can an HR team automate leave approvals?",
    "What should a CRM record for a new lead?",
    "List three ERP integration pitfalls.",
]

WORKFLOWS = [
    ("onboarding", {"department": "Sales", "headcount": 3}),
    ("offboarding", {"department": "Engineering"}),
    ("invoice approval", {"threshold": 5000, "currency": "EUR"}),
    ("lead qualification", {"source": "webinar"}),
]


class RelayUser(HttpUser):
    """Simulates a client of the relay API."""

    wait_time = between(1, 3)

    @task(5)
    def health(self):
        self.client.get("/health")

    @task(1)
    def start(self):
        self.client.post("/agent/start")

    @task(3)
    def query(self):
        with self.client.post(
            "/agent/query",
            json={"query": random.choice(QUERIES)},
            catch_response=True,
        ) as response:
            if response.status_code == 500:
                response.failure(f"Provider error: {response.json().get('error')}")

    @task(2)
    def workflow(self):
        name, parameters = random.choice(WORKFLOWS)
        with self.client.post(
            "/agent/workflow",
            json={"workflow": name, "parameters": parameters},
            catch_response=True,
        ) as response:
            if response.status_code == 500:
                response.failure(f"Provider error: {response.json().get('error')}")

    @task(1)
    def missing_query(self):
        with self.client.post("/agent/query", json={}, catch_response=True) as response:
            if response.status_code == 400:
                response.success()
            else:
                response.failure(f"Expected 400, got {response.status_code}")
