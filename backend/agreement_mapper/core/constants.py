"""Shared constants and enums used across the application."""

from enum import StrEnum


class EntityType(StrEnum):
    """Legal structure of the applicant."""

    INDIVIDUAL = "individual"
    PROPRIETORSHIP = "proprietorship"
    PARTNERSHIP = "partnership"
    COMPANY = "company"


class CompanySubType(StrEnum):
    """Registered-entity variants under EntityType.COMPANY."""

    PVT_LTD = "pvt_ltd"
    LLP = "llp"
    OPC = "opc"


class DocumentType(StrEnum):
    """Uploaded document tags (camelCase, matching the onboarding routes)."""

    SHOP_ACT = "shopAct"
    GST = "gst"
    UDYAM = "udyam"
    BUSINESS_PAN = "businessPan"
    PARTNERSHIP_DEED = "partnershipDeed"
    ADDRESS_PROOF = "addressProof"
    AOA_MOA = "aoaMoa"
    COMPANY_PAN = "companyPan"
    COI = "coi"


# Repeating "persons" rows on the agreement template
MAX_PERSON_ROWS = 2
