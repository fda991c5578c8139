"""Request payload schemas.

Every schema ignores unknown keys and treats an explicit ``null`` on an
optional field as "not provided". Accepted strings are kept exactly as sent.
``validate`` turns pydantic's error list into our ``ValidationError`` so that
handlers never see pydantic exceptions.
"""
from typing import Annotated, Literal, Optional

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictFloat, StrictStr
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]
PositiveAmount = Annotated[StrictFloat, Field(gt=0, allow_inf_nan=False)]
OptionalStr = Optional[StrictStr]


def _check_email(value):
    # format check only; the address is stored as typed
    validate_email(value, check_deliverability=False)
    return value


Email = Annotated[StrictStr, AfterValidator(_check_email)]


class Schema(BaseModel):
    model_config = ConfigDict(extra="ignore")


class AuthSchema(Schema):
    username: NonEmptyStr
    accessKey: NonEmptyStr


class ExpenseSchema(Schema):
    description: NonEmptyStr
    amount: PositiveAmount
    category: NonEmptyStr
    campaignId: OptionalStr = None


class DonationSchema(Schema):
    amount: PositiveAmount
    donorId: NonEmptyStr
    campaignId: OptionalStr = None


class CampaignSchema(Schema):
    name: NonEmptyStr
    description: OptionalStr = None
    targetAmount: Optional[PositiveAmount] = None
    status: Literal["ACTIVE", "COMPLETED", "PAUSED"] = "ACTIVE"


class DonorSchema(Schema):
    name: NonEmptyStr
    email: Optional[Email] = None
    phone: OptionalStr = None
    address: OptionalStr = None


class BeneficiarySchema(Schema):
    name: NonEmptyStr
    description: OptionalStr = None
    contactInfo: OptionalStr = None


def _issues(exc):
    return [
        {
            "path": [str(part) for part in err["loc"]],
            "message": err["msg"],
            "code": err["type"],
        }
        for err in exc.errors()
    ]


def validate(schema, payload, message="Invalid data"):
    """Validate a raw payload, raising ValidationError listing every failed field."""
    try:
        return schema.model_validate(payload if payload is not None else {})
    except PydanticValidationError as exc:
        raise ValidationError(message, details=_issues(exc)) from exc
