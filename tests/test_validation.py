import pytest

from donation_admin.errors import ValidationError
from donation_admin.schemas import (
    BeneficiarySchema,
    CampaignSchema,
    DonationSchema,
    DonorSchema,
    ExpenseSchema,
    validate,
)


def _failed_fields(schema, payload):
    with pytest.raises(ValidationError) as exc:
        validate(schema, payload)
    assert exc.value.status_code == 400
    return {d["path"][0] for d in exc.value.details if d["path"]}


def test_expense_accepts_ints_and_optional_campaign():
    data = validate(ExpenseSchema, {"description": "Food", "amount": 500, "category": "Food"})
    assert data.amount == 500.0
    assert data.campaignId is None


def test_every_violation_is_reported_at_once():
    assert _failed_fields(ExpenseSchema, {"description": "", "amount": -1}) == {
        "description", "amount", "category"
    }


@pytest.mark.parametrize("amount", [0, -0.01, -500, "500", True, float("nan"), float("inf"), None])
def test_amount_must_be_a_positive_number(amount):
    assert _failed_fields(DonationSchema, {"amount": amount, "donorId": "d1"}) == {"amount"}


def test_strings_are_kept_exactly_as_sent():
    data = validate(ExpenseSchema, {"description": "  Food parcels ", "amount": 5, "category": "Food"})
    assert data.description == "  Food parcels "
    assert validate(BeneficiarySchema, {"name": "   "}).name == "   "


def test_campaign_status_defaults_to_active():
    assert validate(CampaignSchema, {"name": "Winter"}).status == "ACTIVE"


@pytest.mark.parametrize("status", ["ACTIVE", "COMPLETED", "PAUSED"])
def test_campaign_status_literals(status):
    assert validate(CampaignSchema, {"name": "x", "status": status}).status == status


def test_campaign_status_rejects_other_values():
    assert _failed_fields(CampaignSchema, {"name": "x", "status": "active"}) == {"status"}


def test_campaign_target_must_be_positive_when_present():
    assert _failed_fields(CampaignSchema, {"name": "x", "targetAmount": 0}) == {"targetAmount"}
    assert validate(CampaignSchema, {"name": "x", "targetAmount": None}).targetAmount is None


def test_donor_email_format():
    assert _failed_fields(DonorSchema, {"name": "Asha", "email": "not-an-email"}) == {"email"}
    assert validate(DonorSchema, {"name": "Asha", "email": "asha@example.org"}).email == "asha@example.org"


def test_donor_email_is_checked_but_stored_as_typed():
    assert validate(DonorSchema, {"name": "Asha", "email": "Asha@Example.ORG"}).email == "Asha@Example.ORG"
    assert _failed_fields(DonorSchema, {"name": "Asha", "email": ""}) == {"email"}


def test_empty_optional_strings_are_kept_and_null_means_absent():
    data = validate(BeneficiarySchema, {"name": "Shelter", "description": "", "contactInfo": None})
    assert data.description == ""
    assert data.contactInfo is None
    assert _failed_fields(CampaignSchema, {"name": "x", "status": ""}) == {"status"}


def test_unknown_keys_are_ignored():
    data = validate(BeneficiarySchema, {"name": "Shelter", "id": "forged", "createdAt": "2020"})
    assert data.model_dump() == {"name": "Shelter", "description": None, "contactInfo": None}


def test_non_object_payload_is_rejected():
    with pytest.raises(ValidationError):
        validate(ExpenseSchema, ["description", "amount"])


def test_missing_payload_reports_required_fields():
    assert _failed_fields(DonationSchema, None) == {"amount", "donorId"}
