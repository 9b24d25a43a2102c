"""Request helpers shared by the HTTP tests."""

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


def register(client, **overrides):
    body = {
        "name": "Ana",
        "email": "ana@x.com",
        "password": "secret1",
        "confirmpassword": "secret1",
    }
    body.update(overrides)
    return client.post("/auth/register", json=body)


def login(client, email="ana@x.com", password="secret1"):
    return client.post("/auth/login", json={"email": email, "password": password})


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
