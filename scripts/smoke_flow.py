"""
End-to-end account flow against a running server.

Registers a throwaway user, logs in, reads and updates the profile and
renames the account's email, printing every response.

Run: python scripts/smoke_flow.py [base_url]
"""

import json
import sys
import time

import httpx

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:5000/api"


def print_section(title):
    print("\n" + "=" * 80)
    print(f"  {title}")
    print("=" * 80)


def print_response(response: httpx.Response):
    print(f"HTTP {response.status_code}")
    print(json.dumps(response.json(), indent=2, ensure_ascii=False))


def main():
    suffix = int(time.time())
    email = f"smoke{suffix}@example.com"
    renamed = f"smoke{suffix}-renamed@example.com"

    with httpx.Client(base_url=BASE_URL, timeout=10.0) as client:
        print_section("STEP 1: Register")
        response = client.post("/auth/register", json={"email": email, "password": "secret1"})
        print_response(response)
        if response.status_code != 201:
            return 1
        token = response.json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        print_section("STEP 2: Login")
        print_response(client.post("/auth/login", json={"email": email, "password": "secret1"}))

        print_section("STEP 3: Profile")
        print_response(client.get("/auth/me", headers=headers))

        print_section("STEP 4: Update mobile number")
        print_response(client.post("/auth/update-profile", json={"mobileNumber": "9999999999"}, headers=headers))

        print_section("STEP 5: Change email")
        print_response(client.post("/auth/update-profile", json={"email": renamed}, headers=headers))

        print_section("STEP 6: Profile with the original token")
        response = client.get("/auth/me", headers=headers)
        print_response(response)

        if response.json()["user"]["email"] != renamed:
            print("\nEmail change did not stick")
            return 1

    print("\nFlow completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
