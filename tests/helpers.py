"""Payload builders shared by the API and storage tests."""

VENDOR_PAYLOAD = {
    "vendorName": "Sharma Builders",
    "ownerName": "Ravi Sharma",
    "contactNumber": "9876543210",
    "email": "ravi@sharmabuilders.in",
    "businessCategory": "Contractor",
    "city": "Pune",
    "description": "Residential construction",
    "password": "secret123",
    "confirmPassword": "secret123",
}

OTHER_VENDOR_PAYLOAD = {
    **VENDOR_PAYLOAD,
    "vendorName": "Kulkarni Electricals",
    "ownerName": "Meera Kulkarni",
    "email": "meera@kulkarni-electricals.in",
    "businessCategory": "Electrician",
    "city": "Mumbai",
}


def rating_payload(vendor_id, score, **overrides):
    return {
        "vendorId": vendor_id,
        "clientName": "Anil Mehta",
        "projectName": "Kitchen remodel",
        "rating": score,
        "comments": "On time and tidy",
        **overrides,
    }


def register(client, payload=None, **overrides):
    body = {**(payload or VENDOR_PAYLOAD), **overrides}
    resp = client.post("/api/vendors/register", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()
