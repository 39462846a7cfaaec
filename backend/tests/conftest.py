"""Shared fixtures: a fixed clock and representative application records."""

from datetime import datetime

import pytest


@pytest.fixture
def fixed_now():
    """Document time used by every mapping test."""
    return datetime(2024, 6, 14, 10, 30)


@pytest.fixture
def individual_application():
    return {
        "entityType": "individual",
        "name": "Typed Name",
        "email": "ravi@example.com",
        "phone": "9876543210",
        "address": "Typed address",
        "faceMatchImage": "data:image/jpeg;base64,FACE",
        "livenessImage": "data:image/jpeg;base64,LIVE",
        "kyc": {
            "aadhaar": {
                "maskedNumber": "123456789012",
                "data": {
                    "name": "Ravi Kumar",
                    "dob": "15-06-1990",
                    "address": "12 MG Road, Pune",
                },
            },
            "pan": {"number": "ABCPK1234F"},
        },
        "references": [
            {"name": "Asha Rao", "mobile": "9000000001", "email": "asha@example.com", "address": "Mumbai"},
            {"name": "Vikram Shah", "mobile": "9000000002", "email": "vikram@example.com", "address": "Nashik"},
        ],
    }


@pytest.fixture
def company_application():
    return {
        "entityType": "company",
        "companyName": "Acme Fintech Pvt Ltd",
        "companySubType": "pvt_ltd",
        "email": "ops@acme.example",
        "phone": "02240000000",
        "livenessImage": "data:image/jpeg;base64,LIVE",
        "directors": [
            {
                "name": "Meera Iyer",
                "mobile": "9100000001",
                "email": "meera@acme.example",
                "din": "D111",
                "dpin": "P111",
                "kyc": {"aadhaar": {"data": {"address": "Chennai"}}},
            },
            {
                "name": "Arjun Mehta",
                "mobile": "9100000002",
                "email": "arjun@acme.example",
                "isSignatory": True,
                "din": "D123",
                "dpin": "P456",
                "kyc": {
                    "faceMatchImage": "data:image/jpeg;base64,ARJUN",
                    "aadhaar": {"data": {"address": "Bengaluru"}},
                },
            },
        ],
        "documents": [
            {"type": "gst", "data": {"address": "GST address, Bengaluru"}},
            {"type": "companyPan", "data": {"pan": "AAACA1234B"}},
        ],
    }


@pytest.fixture
def partnership_application():
    return {
        "entityType": "partnership",
        "firmName": "Rao & Sons",
        "email": "firm@raoandsons.example",
        "phone": "02030000000",
        "businessAddress": "Typed business address",
        "partners": [
            {
                "name": "Suresh Rao",
                "mobile": "9200000001",
                "email": "suresh@raoandsons.example",
                "kyc": {"aadhaar": {"data": {"dob": "15-06-1990", "address": "Hubli"}}},
            },
            {
                "name": "Lata Rao",
                "mobile": "9200000002",
                "email": "lata@raoandsons.example",
                "kyc": {"aadhaar": {"data": {"address": "Dharwad"}}},
            },
        ],
        "documents": [
            {"type": "gst", "data": {"address": "GST address, Hubli"}},
            {"type": "businessPan", "data": {"pan": "AAAFR1234C"}},
        ],
    }


@pytest.fixture
def make_people():
    """Factory for stakeholder / reference records with predictable values."""

    def _make(count):
        return [
            {
                "name": f"Person {i}",
                "mobile": f"90000000{i:02d}",
                "email": f"person{i}@example.com",
                "address": f"Address {i}",
                "kyc": {"aadhaar": {"data": {"address": f"KYC address {i}"}}},
            }
            for i in range(count)
        ]

    return _make
