"""
Field-level validation rules for real-estate records.

Each validator checks a whole record (a dict of raw or already-typed
values) and returns a ValidationResult holding the violated fields with
their messages plus the cleaned, typed data. Nothing is persisted here;
services raise ValidationError when a result is not valid.
"""

import logging
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from realestate.core.config import APP_TZ
from realestate.core.config import now as app_now
from realestate.core.config import today as app_today
from realestate.domain.enums import (
    AgentStatus,
    AppointmentStatus,
    AppointmentType,
    ClientStatus,
    ClientType,
    ListingType,
    PropertyCondition,
    PropertyStatus,
    PropertyType,
    TransactionStatus,
    TransactionType,
)

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}$")
PHONE_PATTERN = re.compile(r"^[+]?[0-9]{10,15}$")

# Set by the persistence layer only
READ_ONLY_FIELDS = ("id", "created_at", "updated_at")


class ValidationError(Exception):
    """Raised when a record violates one or more field constraints."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        errors: Optional[List[Dict[str, str]]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        if errors is None:
            errors = [{"field": field, "message": message}] if field else []
        self.errors = errors


class ValidationResult:
    """Container for validation results."""

    def __init__(self):
        self.errors: List[Dict[str, str]] = []
        self.warnings: List[str] = []
        self.is_valid: bool = True
        self.cleaned_data: Dict[str, Any] = {}

    def add_error(self, message: str, field: Optional[str] = None):
        """Add validation error."""
        self.errors.append({"field": field or "__all__", "message": message})
        self.is_valid = False
        logger.debug(
            "Validation error", extra={"context": {"field": field, "message": message}}
        )

    def add_warning(self, message: str, field: Optional[str] = None):
        """Add validation warning."""
        warning_msg = f"{field}: {message}" if field else message
        self.warnings.append(warning_msg)
        logger.info(f"Validation warning: {warning_msg}")

    def has_error(self, field: str) -> bool:
        return any(error["field"] == field for error in self.errors)

    def messages_for(self, field: str) -> List[str]:
        return [error["message"] for error in self.errors if error["field"] == field]

    def raise_if_invalid(self, entity: str = "Record") -> Dict[str, Any]:
        """Return cleaned data, or raise ValidationError listing every violation."""
        if not self.is_valid:
            raise ValidationError(
                f"{entity} validation failed", errors=list(self.errors)
            )
        return self.cleaned_data


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


class BaseValidator:
    """Base validator with common validation methods.

    Args:
        check_future_dates: enforce "must be in the future" rules. Services
            turn this off on updates that do not touch the date in question.
        today: reference date for future checks (defaults to today in APP_TZ).
    """

    entity_name = "Record"
    fields: tuple = ()

    def __init__(self, check_future_dates: bool = True, today: Optional[date] = None):
        self.check_future_dates = check_future_dates
        self.today = today

    def validate(
        self, data: Dict[str, Any]
    ) -> ValidationResult:  # pragma: no cover - interface definition
        """Validate data for a specific entity type."""
        raise NotImplementedError("Subclasses must implement validate")

    def _start(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()
        for key in data:
            if key in READ_ONLY_FIELDS:
                if data[key] is not None:
                    result.add_warning("system-managed field ignored", key)
            elif key not in self.fields:
                result.add_warning("unknown field ignored", key)
        return result

    def _reference_today(self) -> date:
        return self.today or app_today()

    # ----------------------- typed field helpers -----------------------

    @staticmethod
    def validate_required_field(
        value: Any, field_name: str, result: ValidationResult, message: str
    ) -> bool:
        """Validate that a required field is present and not blank."""
        if _is_blank(value):
            result.add_error(message, field_name)
            return False
        return True

    @staticmethod
    def validate_string(
        value: Any,
        field_name: str,
        result: ValidationResult,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        message: Optional[str] = None,
    ) -> Optional[str]:
        """Validate string length; blank strings are treated as unset."""
        if _is_blank(value):
            return None

        value = str(value).strip()
        too_short = min_length is not None and len(value) < min_length
        too_long = max_length is not None and len(value) > max_length
        if too_short or too_long:
            if message is None:
                if min_length is not None and max_length is not None:
                    message = f"{field_name} must be between {min_length} and {max_length} characters"
                elif max_length is not None:
                    message = f"{field_name} must be at most {max_length} characters"
                else:
                    message = f"{field_name} must be at least {min_length} characters"
            result.add_error(message, field_name)
            return None
        return value

    @staticmethod
    def validate_email(
        value: Any, field_name: str, result: ValidationResult
    ) -> Optional[str]:
        """Validate e-mail format; stored trimmed and lower-cased."""
        if _is_blank(value):
            return None
        email = str(value).strip().lower()
        if len(email) > 255 or not EMAIL_PATTERN.match(email):
            result.add_error("Email should be valid", field_name)
            return None
        return email

    @staticmethod
    def validate_phone(
        value: Any, field_name: str, result: ValidationResult
    ) -> Optional[str]:
        """Phone numbers: optional leading '+', then 10 to 15 digits."""
        if _is_blank(value):
            return None
        phone = str(value).strip()
        if not PHONE_PATTERN.match(phone):
            result.add_error("Phone number should be valid", field_name)
            return None
        return phone

    @staticmethod
    def validate_date(
        value: Any, field_name: str, result: ValidationResult
    ) -> Optional[date]:
        """Validate and convert a date field (date object or YYYY-MM-DD)."""
        if _is_blank(value):
            return None

        if isinstance(value, datetime):
            return value.date()

        if isinstance(value, date):
            return value

        if isinstance(value, str):
            try:
                return datetime.strptime(value.strip(), "%Y-%m-%d").date()
            except ValueError:
                result.add_error("Invalid date. Use format YYYY-MM-DD", field_name)
                return None

        result.add_error("Invalid date format", field_name)
        return None

    @staticmethod
    def validate_datetime(
        value: Any, field_name: str, result: ValidationResult
    ) -> Optional[datetime]:
        """Validate and convert an ISO-8601 datetime; naive values are APP_TZ."""
        if _is_blank(value):
            return None

        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, str):
            try:
                parsed = datetime.fromisoformat(value.strip())
            except ValueError:
                result.add_error("Invalid datetime. Use ISO-8601 format", field_name)
                return None
        else:
            result.add_error("Invalid datetime format", field_name)
            return None

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=APP_TZ)
        return parsed

    @staticmethod
    def validate_decimal(
        value: Any,
        field_name: str,
        result: ValidationResult,
        min_value: Optional[Decimal] = None,
        max_value: Optional[Decimal] = None,
        min_exclusive: bool = False,
        message: Optional[str] = None,
    ) -> Optional[Decimal]:
        """Validate and convert decimal field."""
        if _is_blank(value):
            return None

        if isinstance(value, bool):
            result.add_error("Invalid value. Use a numeric format", field_name)
            return None

        try:
            decimal_value = (
                value if isinstance(value, Decimal) else Decimal(str(value).strip())
            )
        except (InvalidOperation, TypeError, ValueError):
            result.add_error("Invalid value. Use a numeric format", field_name)
            return None

        if not decimal_value.is_finite():
            result.add_error("Invalid value. Use a numeric format", field_name)
            return None

        if min_value is not None:
            below = (
                decimal_value <= min_value if min_exclusive else decimal_value < min_value
            )
            if below:
                qualifier = "greater than" if min_exclusive else "at least"
                result.add_error(
                    message or f"{field_name} must be {qualifier} {min_value}",
                    field_name,
                )
                return None

        if max_value is not None and decimal_value > max_value:
            result.add_error(
                message or f"{field_name} must be at most {max_value}", field_name
            )
            return None

        return decimal_value

    @staticmethod
    def validate_integer(
        value: Any,
        field_name: str,
        result: ValidationResult,
        min_value: Optional[int] = None,
        max_value: Optional[int] = None,
        message: Optional[str] = None,
    ) -> Optional[int]:
        """Validate and convert integer field."""
        if _is_blank(value):
            return None

        if isinstance(value, bool) or (
            isinstance(value, float) and not value.is_integer()
        ):
            result.add_error("Value must be a whole number", field_name)
            return None

        try:
            int_value = int(value)
        except (ValueError, TypeError):
            result.add_error("Value must be a whole number", field_name)
            return None

        if min_value is not None and int_value < min_value:
            result.add_error(
                message or f"{field_name} must be at least {min_value}", field_name
            )
            return None

        if max_value is not None and int_value > max_value:
            result.add_error(
                message or f"{field_name} must be at most {max_value}", field_name
            )
            return None

        return int_value

    @staticmethod
    def validate_enum(
        value: Any, enum_cls: Type[Enum], field_name: str, result: ValidationResult
    ) -> Optional[Enum]:
        """Accept an enum member or its (case-insensitive) name."""
        if _is_blank(value):
            return None
        if isinstance(value, enum_cls):
            return value
        try:
            return enum_cls[str(value).strip().upper()]
        except KeyError:
            allowed = ", ".join(member.name for member in enum_cls)
            result.add_error(f"Value must be one of: {allowed}", field_name)
            return None

    @staticmethod
    def validate_boolean(
        value: Any, field_name: str, result: ValidationResult
    ) -> Optional[bool]:
        if value is None:
            return None
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "1", "yes"):
            return True
        if isinstance(value, str) and value.strip().lower() in ("false", "0", "no"):
            return False
        result.add_error("Value must be true or false", field_name)
        return None

    # ----------------------- composite helpers -----------------------

    def _name(self, data, result, field_name: str, label: str) -> None:
        value = data.get(field_name)
        if self.validate_required_field(
            value, field_name, result, f"{label} is required"
        ):
            result.cleaned_data[field_name] = self.validate_string(
                value,
                field_name,
                result,
                min_length=2,
                max_length=50,
                message=f"{label} must be between 2 and 50 characters",
            )

    def _contact(self, data, result) -> None:
        """Email, phone and address block shared by agents and clients."""
        if self.validate_required_field(
            data.get("email"), "email", result, "Email is required"
        ):
            result.cleaned_data["email"] = self.validate_email(
                data.get("email"), "email", result
            )
        if self.validate_required_field(
            data.get("phone_number"), "phone_number", result, "Phone number is required"
        ):
            result.cleaned_data["phone_number"] = self.validate_phone(
                data.get("phone_number"), "phone_number", result
            )
        if self.validate_required_field(
            data.get("address"), "address", result, "Address is required"
        ):
            result.cleaned_data["address"] = self.validate_string(
                data.get("address"), "address", result, max_length=500
            )
        for field_name in ("city", "state"):
            result.cleaned_data[field_name] = self.validate_string(
                data.get(field_name), field_name, result, max_length=255
            )
        result.cleaned_data["postal_code"] = self.validate_string(
            data.get("postal_code"), "postal_code", result, max_length=20
        )

    def _text(self, data, result, field_name: str, max_length: int = 255) -> None:
        result.cleaned_data[field_name] = self.validate_string(
            data.get(field_name), field_name, result, max_length=max_length
        )

    def _reference(
        self, data, result, field_name: str, label: str, required: bool = False
    ) -> None:
        value = data.get(field_name)
        if required and not self.validate_required_field(
            value, field_name, result, f"{label} is required"
        ):
            return
        result.cleaned_data[field_name] = self.validate_integer(
            value, field_name, result, min_value=1, message=f"{label} must be a valid ID"
        )

    def _non_negative_int(self, data, result, field_name: str, message=None) -> None:
        result.cleaned_data[field_name] = self.validate_integer(
            data.get(field_name), field_name, result, min_value=0, message=message
        )

    def _non_negative_decimal(self, data, result, field_name: str) -> None:
        result.cleaned_data[field_name] = self.validate_decimal(
            data.get(field_name),
            field_name,
            result,
            min_value=Decimal("0"),
            message=f"{field_name} cannot be negative",
        )


class AgentValidator(BaseValidator):
    """Validator for agent records."""

    entity_name = "Agent"
    fields = (
        "first_name",
        "last_name",
        "email",
        "phone_number",
        "license_number",
        "license_expiry_date",
        "address",
        "city",
        "state",
        "postal_code",
        "hire_date",
        "commission_rate",
        "specialization",
        "bio",
        "profile_image_url",
        "status",
        "years_experience",
        "languages_spoken",
    )

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = self._start(data)

        self._name(data, result, "first_name", "First name")
        self._name(data, result, "last_name", "Last name")
        self._contact(data, result)

        if self.validate_required_field(
            data.get("license_number"),
            "license_number",
            result,
            "License number is required",
        ):
            result.cleaned_data["license_number"] = self.validate_string(
                data.get("license_number"), "license_number", result, max_length=100
            )

        if _is_blank(data.get("license_expiry_date")):
            result.add_error("License expiry date is required", "license_expiry_date")
        else:
            expiry = self.validate_date(
                data.get("license_expiry_date"), "license_expiry_date", result
            )
            if (
                expiry is not None
                and self.check_future_dates
                and expiry <= self._reference_today()
            ):
                result.add_error(
                    "License expiry date must be in the future", "license_expiry_date"
                )
                expiry = None
            result.cleaned_data["license_expiry_date"] = expiry

        result.cleaned_data["hire_date"] = self.validate_date(
            data.get("hire_date"), "hire_date", result
        )
        result.cleaned_data["commission_rate"] = self.validate_decimal(
            data.get("commission_rate"),
            "commission_rate",
            result,
            min_value=Decimal("0"),
            max_value=Decimal("100"),
            message="Commission rate must be between 0 and 100",
        )
        self._text(data, result, "specialization")
        self._text(data, result, "bio", max_length=1000)
        self._text(data, result, "profile_image_url", max_length=500)
        result.cleaned_data["status"] = self.validate_enum(
            data.get("status"), AgentStatus, "status", result
        )
        self._non_negative_int(
            data,
            result,
            "years_experience",
            message="Years of experience cannot be negative",
        )
        self._text(data, result, "languages_spoken")
        return result


class PropertyValidator(BaseValidator):
    """Validator for property listings."""

    entity_name = "Property"
    fields = (
        "title",
        "description",
        "address",
        "city",
        "state",
        "postal_code",
        "country",
        "property_type",
        "listing_type",
        "price",
        "bedrooms",
        "bathrooms",
        "square_feet",
        "lot_size",
        "year_built",
        "garage_spaces",
        "parking_spaces",
        "property_features",
        "appliances_included",
        "heating_type",
        "cooling_type",
        "flooring_type",
        "property_condition",
        "hoa_fee",
        "property_taxes",
        "listing_date",
        "available_date",
        "status",
        "virtual_tour_url",
        "main_image_url",
        "agent_id",
        "owner_id",
    )

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = self._start(data)

        if self.validate_required_field(
            data.get("title"), "title", result, "Property title is required"
        ):
            result.cleaned_data["title"] = self.validate_string(
                data.get("title"),
                "title",
                result,
                min_length=5,
                max_length=200,
                message="Property title must be between 5 and 200 characters",
            )
        self._text(data, result, "description", max_length=2000)

        for field_name, label, max_length in (
            ("address", "Address", 500),
            ("city", "City", 255),
            ("state", "State", 255),
            ("postal_code", "Postal code", 20),
        ):
            if self.validate_required_field(
                data.get(field_name), field_name, result, f"{label} is required"
            ):
                result.cleaned_data[field_name] = self.validate_string(
                    data.get(field_name), field_name, result, max_length=max_length
                )
        self._text(data, result, "country")

        for field_name, enum_cls, label in (
            ("property_type", PropertyType, "Property type"),
            ("listing_type", ListingType, "Listing type"),
        ):
            if self.validate_required_field(
                data.get(field_name), field_name, result, f"{label} is required"
            ):
                result.cleaned_data[field_name] = self.validate_enum(
                    data.get(field_name), enum_cls, field_name, result
                )

        if self.validate_required_field(
            data.get("price"), "price", result, "Price is required"
        ):
            result.cleaned_data["price"] = self.validate_decimal(
                data.get("price"),
                "price",
                result,
                min_value=Decimal("0"),
                min_exclusive=True,
                message="Price must be greater than 0",
            )

        for field_name, label in (("bedrooms", "Bedrooms"), ("bathrooms", "Bathrooms")):
            if self.validate_required_field(
                data.get(field_name), field_name, result, f"{label} count is required"
            ):
                result.cleaned_data[field_name] = self.validate_integer(
                    data.get(field_name),
                    field_name,
                    result,
                    min_value=0,
                    message=f"{label} count cannot be negative",
                )

        for field_name in ("square_feet", "garage_spaces", "parking_spaces"):
            self._non_negative_int(data, result, field_name)
        result.cleaned_data["year_built"] = self.validate_integer(
            data.get("year_built"), "year_built", result, min_value=1
        )
        self._non_negative_decimal(data, result, "lot_size")
        self._text(data, result, "property_features", max_length=1000)
        self._text(data, result, "appliances_included", max_length=500)
        for field_name in ("heating_type", "cooling_type", "flooring_type"):
            self._text(data, result, field_name)
        result.cleaned_data["property_condition"] = self.validate_enum(
            data.get("property_condition"),
            PropertyCondition,
            "property_condition",
            result,
        )
        self._non_negative_decimal(data, result, "hoa_fee")
        self._non_negative_decimal(data, result, "property_taxes")
        result.cleaned_data["listing_date"] = self.validate_date(
            data.get("listing_date"), "listing_date", result
        )
        result.cleaned_data["available_date"] = self.validate_date(
            data.get("available_date"), "available_date", result
        )
        result.cleaned_data["status"] = self.validate_enum(
            data.get("status"), PropertyStatus, "status", result
        )
        self._text(data, result, "virtual_tour_url", max_length=500)
        self._text(data, result, "main_image_url", max_length=500)
        self._reference(data, result, "agent_id", "Listing agent", required=True)
        self._reference(data, result, "owner_id", "Owner")
        return result


class ClientValidator(BaseValidator):
    """Validator for client records."""

    entity_name = "Client"
    fields = (
        "first_name",
        "last_name",
        "email",
        "phone_number",
        "address",
        "city",
        "state",
        "postal_code",
        "client_type",
        "budget_min",
        "budget_max",
        "preferred_locations",
        "property_preferences",
        "status",
        "lead_source",
        "notes",
    )

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = self._start(data)

        self._name(data, result, "first_name", "First name")
        self._name(data, result, "last_name", "Last name")
        self._contact(data, result)

        if data.get("client_type") is None or _is_blank(data.get("client_type")):
            result.add_error("Client type is required", "client_type")
        else:
            result.cleaned_data["client_type"] = self.validate_enum(
                data.get("client_type"), ClientType, "client_type", result
            )

        self._non_negative_decimal(data, result, "budget_min")
        self._non_negative_decimal(data, result, "budget_max")
        budget_min = result.cleaned_data.get("budget_min")
        budget_max = result.cleaned_data.get("budget_max")
        if budget_min is not None and budget_max is not None and budget_min > budget_max:
            result.add_error(
                "Minimum budget cannot exceed maximum budget", "budget_max"
            )

        self._text(data, result, "preferred_locations")
        self._text(data, result, "property_preferences", max_length=1000)
        result.cleaned_data["status"] = self.validate_enum(
            data.get("status"), ClientStatus, "status", result
        )
        self._text(data, result, "lead_source")
        self._text(data, result, "notes", max_length=1000)
        return result


class TransactionValidator(BaseValidator):
    """Validator for transactions."""

    entity_name = "Transaction"
    fields = (
        "agent_id",
        "property_id",
        "client_id",
        "transaction_type",
        "amount",
        "commission_amount",
        "status",
        "transaction_date",
        "closing_date",
        "notes",
    )

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = self._start(data)

        self._reference(data, result, "agent_id", "Agent", required=True)
        self._reference(data, result, "property_id", "Property")
        self._reference(data, result, "client_id", "Client")

        if self.validate_required_field(
            data.get("transaction_type"),
            "transaction_type",
            result,
            "Transaction type is required",
        ):
            result.cleaned_data["transaction_type"] = self.validate_enum(
                data.get("transaction_type"), TransactionType, "transaction_type", result
            )

        if self.validate_required_field(
            data.get("amount"), "amount", result, "Amount is required"
        ):
            result.cleaned_data["amount"] = self.validate_decimal(
                data.get("amount"),
                "amount",
                result,
                min_value=Decimal("0"),
                min_exclusive=True,
                message="Amount must be greater than 0",
            )
        self._non_negative_decimal(data, result, "commission_amount")
        result.cleaned_data["status"] = self.validate_enum(
            data.get("status"), TransactionStatus, "status", result
        )

        transaction_date = self.validate_date(
            data.get("transaction_date"), "transaction_date", result
        )
        closing_date = self.validate_date(data.get("closing_date"), "closing_date", result)
        if (
            transaction_date is not None
            and closing_date is not None
            and closing_date < transaction_date
        ):
            result.add_error(
                "Closing date cannot be before the transaction date", "closing_date"
            )
        result.cleaned_data["transaction_date"] = transaction_date
        result.cleaned_data["closing_date"] = closing_date
        self._text(data, result, "notes", max_length=1000)
        return result


class AppointmentValidator(BaseValidator):
    """Validator for appointments."""

    entity_name = "Appointment"
    fields = (
        "property_id",
        "client_id",
        "agent_id",
        "scheduled_at",
        "duration_minutes",
        "appointment_type",
        "status",
        "notes",
    )

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = self._start(data)

        self._reference(data, result, "property_id", "Property", required=True)
        self._reference(data, result, "client_id", "Client")
        self._reference(data, result, "agent_id", "Agent")

        if self.validate_required_field(
            data.get("scheduled_at"),
            "scheduled_at",
            result,
            "Scheduled time is required",
        ):
            scheduled_at = self.validate_datetime(
                data.get("scheduled_at"), "scheduled_at", result
            )
            if (
                scheduled_at is not None
                and self.check_future_dates
                and scheduled_at <= app_now()
            ):
                result.add_error(
                    "Appointment must be scheduled in the future", "scheduled_at"
                )
                scheduled_at = None
            result.cleaned_data["scheduled_at"] = scheduled_at

        result.cleaned_data["duration_minutes"] = self.validate_integer(
            data.get("duration_minutes"),
            "duration_minutes",
            result,
            min_value=1,
            message="Duration must be positive",
        )
        result.cleaned_data["appointment_type"] = self.validate_enum(
            data.get("appointment_type"), AppointmentType, "appointment_type", result
        )
        result.cleaned_data["status"] = self.validate_enum(
            data.get("status"), AppointmentStatus, "status", result
        )
        self._text(data, result, "notes", max_length=1000)
        return result


class PropertyImageValidator(BaseValidator):
    """Validator for property images."""

    entity_name = "Property image"
    fields = ("property_id", "image_url", "caption", "display_order", "is_primary")

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = self._start(data)

        self._reference(data, result, "property_id", "Property", required=True)
        if self.validate_required_field(
            data.get("image_url"), "image_url", result, "Image URL is required"
        ):
            result.cleaned_data["image_url"] = self.validate_string(
                data.get("image_url"), "image_url", result, max_length=500
            )
        self._text(data, result, "caption")
        self._non_negative_int(
            data, result, "display_order", message="Display order cannot be negative"
        )
        result.cleaned_data["is_primary"] = self.validate_boolean(
            data.get("is_primary"), "is_primary", result
        )
        return result


_VALIDATORS = {
    "agent": AgentValidator,
    "property": PropertyValidator,
    "client": ClientValidator,
    "transaction": TransactionValidator,
    "appointment": AppointmentValidator,
    "property_image": PropertyImageValidator,
}


# Factory function to get appropriate validator
def get_validator(entity_type: str, **options: Any) -> BaseValidator:
    """Get validator instance for entity type."""
    validator_cls = _VALIDATORS.get(entity_type.lower())
    if not validator_cls:
        raise ValueError(f"No validator found for entity type: {entity_type}")
    return validator_cls(**options)

